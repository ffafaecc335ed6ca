"""Centralised settings for the nodewatch service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_SOURCE_URL = "https://api.uouin.com/cloudflare.html"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source page / filtering
    # ------------------------------------------------------------------
    source_url: str = field(
        default_factory=lambda: os.environ.get("NODEWATCH_SOURCE_URL", DEFAULT_SOURCE_URL)
    )
    threshold_mbps: float = field(
        default_factory=lambda: float(os.environ.get("NODEWATCH_THRESHOLD_MBPS", "200"))
    )

    # ------------------------------------------------------------------
    # Poller
    # ------------------------------------------------------------------
    poll_interval: float = field(
        default_factory=lambda: float(os.environ.get("NODEWATCH_POLL_INTERVAL", "1800"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # HTTP API
    # ------------------------------------------------------------------
    api_host: str = field(
        default_factory=lambda: os.environ.get("NODEWATCH_HOST", "127.0.0.1")
    )
    api_port: int = field(
        default_factory=lambda: int(os.environ.get("NODEWATCH_PORT", "8080"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )


# Module-level singleton, import this everywhere:
#   from nodewatch.config import settings
settings = Settings()
