"""Centralised settings for the A11y Scan backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env", override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Browser / page loading
    # ------------------------------------------------------------------
    scan_timeout_ms: int = field(
        default_factory=lambda: int(os.environ.get("SCAN_TIMEOUT_MS", "30000"))
    )
    # Post-navigation pause that lets late-rendering content appear.
    settle_delay_ms: int = field(
        default_factory=lambda: int(os.environ.get("SETTLE_DELAY_MS", "800"))
    )
    browser_headless: bool = field(
        default_factory=lambda: _env_flag("BROWSER_HEADLESS", "1")
    )

    # ------------------------------------------------------------------
    # axe-core rule engine bundle
    # ------------------------------------------------------------------
    axe_script_path: Path = field(
        default_factory=lambda: Path(
            os.environ.get("AXE_SCRIPT_PATH", _PROJECT_ROOT / "assets" / "axe.min.js")
        )
    )
    axe_cdn_url: str = field(
        default_factory=lambda: os.environ.get(
            "AXE_CDN_URL",
            "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.10.2/axe.min.js",
        )
    )
    download_timeout: float = field(
        default_factory=lambda: float(os.environ.get("DOWNLOAD_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )
    log_file: Path | None = field(
        default_factory=lambda: Path(os.environ["LOG_FILE"]) if os.environ.get("LOG_FILE") else None
    )

    # ------------------------------------------------------------------
    # HTTP API
    # ------------------------------------------------------------------
    cors_origins: list[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    )

    def axe_bundle_available(self) -> bool:
        """Return ``True`` if the axe bundle exists and is non-empty."""
        path = self.axe_script_path
        return path.is_file() and path.stat().st_size > 0


# Module-level singleton — import this everywhere:
#   from backend.config import settings
settings = Settings()
