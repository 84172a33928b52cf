"""
Sentiment Service - Configuration.

============================================================
PURPOSE
============================================================
Settings for the sentiment HTTP service and for callers of it.

Values come from the environment (optionally a .env file),
with defaults matching a local development setup.

============================================================
"""

import logging
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class ServiceConfig:
    """Configuration for the sentiment service and its clients."""

    # Server settings
    host: str = "0.0.0.0"
    """Interface the HTTP service binds to."""

    port: int = 3000
    """Port the HTTP service listens on."""

    log_level: str = "INFO"
    """Logging level."""

    # Classifier settings
    lexicon_language: str = "en"
    """AFINN word list language."""

    normalize_by_token_count: bool = False
    """Divide the lexicon sum by the number of tokens."""

    # Client settings
    service_url: str = "http://localhost:3000"
    """Base URL callers use to reach the service."""

    timeout_seconds: float = 5.0
    """Per-request timeout for callers."""

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "ServiceConfig":
        """Load configuration from environment variables."""
        if dotenv:
            load_dotenv()
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            lexicon_language=os.getenv("SENTIMENT_LEXICON_LANGUAGE", "en"),
            normalize_by_token_count=_env_flag("SENTIMENT_NORMALIZE"),
            service_url=os.getenv("SENTIMENT_SERVICE_URL", "http://localhost:3000").rstrip("/"),
            timeout_seconds=float(os.getenv("SENTIMENT_TIMEOUT_SECONDS", "5.0")),
        )

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not 0 < self.port < 65536:
            errors.append(f"port must be between 1 and 65535, got {self.port}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")

        if self.timeout_seconds <= 0:
            errors.append("timeout_seconds must be positive")

        if not self.service_url.startswith(("http://", "https://")):
            errors.append(f"service_url must be an http(s) URL, got {self.service_url}")

        return errors
