"""Metrics tracking for crawl progress."""
import time
import logging
from collections import defaultdict
from typing import Dict

logger = logging.getLogger(__name__)


class Metrics:
    """Track crawl counters and code sources."""

    def __init__(self, total: int):
        self.total = total
        self.start_time = time.time()
        self.counters: Dict[str, int] = defaultdict(int)
        self.code_sources: Dict[str, int] = defaultdict(int)

    def increment(self, key: str, amount: int = 1) -> None:
        """Increment a counter."""
        self.counters[key] += amount

    def record_code_source(self, source: str | None) -> None:
        """Count which cascade step produced a model code."""
        self.code_sources[source or "not_found"] += 1

    def get_rate(self) -> float:
        """Get current processing rate (items/second)."""
        elapsed = time.time() - self.start_time
        processed = self.counters.get("processed", 0)
        if elapsed > 0:
            return processed / elapsed
        return 0.0

    def get_summary(self) -> Dict:
        """Get summary statistics."""
        return {
            "total": self.total,
            "processed": self.counters.get("processed", 0),
            "ok": self.counters.get("ok", 0),
            "failed": self.counters.get("failed", 0),
            "rate": self.get_rate(),
            "elapsed_seconds": time.time() - self.start_time,
            "code_sources": dict(self.code_sources),
        }
