"""Scan orchestrator: one URL in, one :class:`ScanResponse` out."""

from __future__ import annotations

from backend.logger import get_logger
from backend.scanner.axe import run_axe
from backend.scanner.browser import browser_page, load_page
from backend.scanner.models import ScanResponse, utc_timestamp
from backend.scanner.shaper import shape_violations
from backend.scanner.urls import normalize_url

logger = get_logger(__name__)


async def scan(url: str) -> ScanResponse:
    """Audit *url* with axe-core in a freshly launched headless browser.

    Never raises: any failure while loading or auditing the page is returned
    as ``ScanResponse(ok=False, error=...)``.  The browser is closed before
    this coroutine returns, whatever the outcome.
    """
    target_url = url
    try:
        target_url = normalize_url(url)
        logger.info("Scanning %s", target_url)

        async with browser_page() as page:
            await load_page(page, target_url)
            raw = await run_axe(page)

        violations = shape_violations(raw)
    except Exception as exc:
        logger.warning("Scan of %s failed: %s", target_url, exc)
        return ScanResponse.failure(
            str(exc) or "Scan failed",
            url=target_url,
            timestamp=utc_timestamp(),
        )

    logger.info("Scan of %s found %d violation(s)", target_url, len(violations))
    return ScanResponse.success(target_url, violations)
