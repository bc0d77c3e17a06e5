"""Provisioning of the axe-core browser bundle."""

from __future__ import annotations

from pathlib import Path

import httpx

from backend.config import settings
from backend.logger import get_logger

logger = get_logger(__name__)


def ensure_axe_bundle(
    dest: Path | None = None,
    source_url: str | None = None,
    force: bool = False,
) -> Path:
    """Make sure the axe bundle exists at *dest*, downloading it if needed.

    An existing non-empty file is kept unless *force* is set.

    Raises:
        httpx.HTTPStatusError: If the CDN returns a 4xx/5xx status code.
    """
    dest = dest or settings.axe_script_path
    source_url = source_url or settings.axe_cdn_url

    if not force and dest.is_file() and dest.stat().st_size > 0:
        return dest

    logger.info("Downloading axe-core bundle from %s", source_url)
    with httpx.Client(timeout=settings.download_timeout, follow_redirects=True) as client:
        response = client.get(source_url)
        response.raise_for_status()

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(response.content)
    logger.info("Saved axe-core bundle to %s (%d bytes)", dest, len(response.content))
    return dest
