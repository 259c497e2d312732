"""Configuration management for the Bible reading plan."""

import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

logger = logging.getLogger(__name__)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_data_dir() -> Path:
    """Get the data directory."""
    return get_project_root() / "data"


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    journal_path: Path
    plan_year: int
    log_level: str = "INFO"
    bible_api_url: str = "https://bible-api.com"
    bible_translation: str = "kjv"
    request_timeout: int = 10

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        timeout_raw = os.getenv("REQUEST_TIMEOUT", "10")
        try:
            timeout = int(timeout_raw)
        except ValueError:
            raise ValueError(
                f"REQUEST_TIMEOUT must be an integer, got {timeout_raw!r}"
            ) from None
        if timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")

        year_raw = os.getenv("PLAN_YEAR")
        try:
            year = int(year_raw) if year_raw else date.today().year
        except ValueError:
            raise ValueError(f"PLAN_YEAR must be a year, got {year_raw!r}") from None

        journal = os.getenv("JOURNAL_PATH")

        config = cls(
            journal_path=Path(journal) if journal else get_data_dir() / "journal.json",
            plan_year=year,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            bible_api_url=os.getenv("BIBLE_API_URL", "https://bible-api.com").rstrip(
                "/"
            ),
            bible_translation=os.getenv("BIBLE_TRANSLATION", "kjv"),
            request_timeout=timeout,
        )
        logger.debug(f"Journal file: {config.journal_path}")
        return config

    def setup_logging(self) -> None:
        """Configure application logging."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
