"""Configuration management from environment variables."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file
load_dotenv()

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_7_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/14.1.2 Mobile/15E148 Safari/604.1"
)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    # GSMArena (mobile site)
    BASE_URL: str = os.getenv("BASE_URL", "https://m.gsmarena.com/")
    YEAR_MIN: int = int(os.getenv("YEAR_MIN", "2025"))
    LISTING_URL: str | None = os.getenv("LISTING_URL")

    # HTTP
    USER_AGENT: str = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
    TIMEOUT: int = int(os.getenv("TIMEOUT", "30"))
    VERIFY_TLS: bool = _env_bool("VERIFY_TLS", "false")

    # Crawl
    REQUEST_DELAY: float = float(os.getenv("REQUEST_DELAY", "2.0"))

    # Output
    OUTPUT_FILE: Path = Path(os.getenv("OUTPUT_FILE", "device.json"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        errors = []
        if not cls.BASE_URL.startswith(("http://", "https://")):
            errors.append("BASE_URL must be an http(s) URL")
        if not cls.BASE_URL.endswith("/"):
            errors.append("BASE_URL must end with '/'")
        if cls.TIMEOUT <= 0:
            errors.append("TIMEOUT must be positive")
        if cls.REQUEST_DELAY < 0:
            errors.append("REQUEST_DELAY must not be negative")
        if not cls.USER_AGENT:
            errors.append("USER_AGENT is required")
        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")


config = Config()
