"""Shared fixtures: a fake Playwright driver so no real browser is launched.

``fake_playwright`` patches ``backend.scanner.browser.async_playwright`` and
records every browser launch / close in a :class:`BrowserTracker`.  Tests
configure page behaviour per URL via ``tracker.pages``.
"""

from __future__ import annotations

import asyncio
import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from playwright.async_api import Error as PlaywrightError


# ---------------------------------------------------------------------------
# Fake Playwright objects
# ---------------------------------------------------------------------------

@dataclass
class PageBehaviour:
    """How a fake page responds for one URL."""

    axe_result: Any = field(default_factory=lambda: {"violations": []})
    goto_error: str | None = None
    evaluate_error: str | None = None


@dataclass
class BrowserTracker:
    pages: dict[str, PageBehaviour] = field(default_factory=dict)
    launched: int = 0
    closed: int = 0
    launch_kwargs: list[dict[str, Any]] = field(default_factory=list)
    context_kwargs: list[dict[str, Any]] = field(default_factory=list)
    created_pages: list["FakePage"] = field(default_factory=list)

    def behaviour_for(self, url: str) -> PageBehaviour:
        return self.pages.get(url, PageBehaviour())


class FakePage:
    def __init__(self, tracker: BrowserTracker) -> None:
        self._tracker = tracker
        self._behaviour = PageBehaviour()
        self.default_timeout: float | None = None
        self.navigation_timeout: float | None = None
        self.visited: list[tuple[str, str | None]] = []
        self.waits: list[float] = []
        self.scripts: list[str] = []
        self.evaluated: list[str] = []

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.navigation_timeout = timeout

    async def goto(self, url: str, wait_until: str | None = None) -> None:
        self.visited.append((url, wait_until))
        self._behaviour = self._tracker.behaviour_for(url)
        await asyncio.sleep(0)
        if self._behaviour.goto_error:
            raise PlaywrightError(self._behaviour.goto_error)

    async def wait_for_timeout(self, timeout: float) -> None:
        self.waits.append(timeout)
        await asyncio.sleep(0)

    async def add_script_tag(self, path: str | None = None, **kwargs: Any) -> None:
        self.scripts.append(path)

    async def evaluate(self, expression: str) -> Any:
        self.evaluated.append(expression)
        await asyncio.sleep(0)
        if self._behaviour.evaluate_error:
            raise PlaywrightError(self._behaviour.evaluate_error)
        return self._behaviour.axe_result


class FakeContext:
    def __init__(self, tracker: BrowserTracker) -> None:
        self._tracker = tracker

    async def new_page(self) -> FakePage:
        page = FakePage(self._tracker)
        self._tracker.created_pages.append(page)
        return page


class FakeBrowser:
    def __init__(self, tracker: BrowserTracker) -> None:
        self._tracker = tracker

    async def new_context(self, **kwargs: Any) -> FakeContext:
        self._tracker.context_kwargs.append(kwargs)
        return FakeContext(self._tracker)

    async def close(self) -> None:
        self._tracker.closed += 1


class FakeChromium:
    def __init__(self, tracker: BrowserTracker) -> None:
        self._tracker = tracker

    async def launch(self, **kwargs: Any) -> FakeBrowser:
        self._tracker.launched += 1
        self._tracker.launch_kwargs.append(kwargs)
        await asyncio.sleep(0)
        return FakeBrowser(self._tracker)


class FakePlaywrightManager:
    def __init__(self, tracker: BrowserTracker) -> None:
        self.chromium = FakeChromium(tracker)

    async def __aenter__(self) -> "FakePlaywrightManager":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def axe_bundle(tmp_path, monkeypatch) -> Path:
    """A placeholder axe bundle wired into settings."""
    bundle = tmp_path / "axe.min.js"
    bundle.write_text("window.axe = window.axe || {};", encoding="utf-8")
    monkeypatch.setattr("backend.config.settings.axe_script_path", bundle)
    return bundle


@pytest.fixture()
def fake_playwright(monkeypatch, axe_bundle) -> BrowserTracker:
    tracker = BrowserTracker()
    monkeypatch.setattr(
        "backend.scanner.browser.async_playwright",
        lambda: FakePlaywrightManager(tracker),
    )
    return tracker


AXE_IMAGE_ALT_RESULT: dict[str, Any] = {
    "url": "https://example.com/",
    "violations": [
        {
            "id": "image-alt",
            "impact": "critical",
            "description": "Ensures <img> elements have alternate text or a role of none or presentation",
            "help": "Images must have alternate text",
            "helpUrl": "https://dequeuniversity.com/rules/axe/4.10/image-alt",
            "tags": ["cat.text-alternatives", "wcag2a", "wcag111"],
            "nodes": [
                {
                    "html": '<img src="/logo.png">',
                    "target": ["img"],
                    "failureSummary": "Fix any of the following:\n  Element does not have an alt attribute",
                }
            ],
        }
    ],
}


@pytest.fixture()
def image_alt_result() -> dict[str, Any]:
    """A raw ``axe.run`` result holding one ``image-alt`` violation."""
    return copy.deepcopy(AXE_IMAGE_ALT_RESULT)
