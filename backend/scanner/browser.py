"""Headless Chromium lifecycle and page loading via Playwright."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from backend.config import settings
from backend.scanner.errors import NavigationError

# Sandboxing is disabled so Chromium can start inside containers.
LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


@asynccontextmanager
async def browser_page() -> AsyncIterator[Page]:
    """Launch a fresh Chromium and yield a page in an isolated context.

    One browser per call, closed on every exit path.  TLS certificate errors
    are ignored so self-signed sites can still be audited.
    """
    async with async_playwright() as pw:
        browser = await pw.chromium.launch(
            headless=settings.browser_headless,
            args=LAUNCH_ARGS,
        )
        try:
            context = await browser.new_context(ignore_https_errors=True)
            page = await context.new_page()
            page.set_default_timeout(settings.scan_timeout_ms)
            page.set_default_navigation_timeout(settings.scan_timeout_ms)
            yield page
        finally:
            await browser.close()


async def load_page(page: Page, url: str) -> None:
    """Navigate *page* to *url* and give late content time to render.

    Waits for ``DOMContentLoaded`` only, not network idle, then sleeps for
    ``settings.settle_delay_ms``.

    Raises:
        NavigationError: If Playwright fails to load the page.
    """
    try:
        await page.goto(url, wait_until="domcontentloaded")
    except PlaywrightError as exc:
        raise NavigationError(exc.message) from exc
    await page.wait_for_timeout(settings.settle_delay_ms)
