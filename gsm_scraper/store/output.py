"""Render and persist crawl results."""
import logging
from pathlib import Path
from typing import Iterable
import orjson

from gsm_scraper.parse.models import DeviceRecord

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found"


def format_summary(devices: Iterable[DeviceRecord]) -> str:
    """Human-readable listing of all devices."""
    lines = ["Results:", "========", ""]
    for index, device in enumerate(devices, start=1):
        lines.extend(
            [
                f"Device {index}:",
                f"  Brand: {device.brand}",
                f"  Model: {device.model_name}",
                f"  MISC Model: {device.misc_model_code or NOT_FOUND}",
                f"  Serial Code: {device.model_code or NOT_FOUND}",
                f"  URL: {device.source_url}",
                "  ---",
                "",
            ]
        )
    return "\n".join(lines)


def dump_devices(devices: Iterable[DeviceRecord]) -> bytes:
    """Serialize devices as a pretty-printed UTF-8 JSON array."""
    # orjson writes non-ASCII as-is
    return orjson.dumps([device.to_output() for device in devices], option=orjson.OPT_INDENT_2)


def save_devices(devices: Iterable[DeviceRecord], path: Path) -> Path:
    """Write the JSON dump to path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(dump_devices(devices))
    logger.info(f"Devices dumped to {path}")
    return path
