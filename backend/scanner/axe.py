"""Injects axe-core into a loaded page and runs its audit."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from backend.config import settings
from backend.scanner.errors import AxeBundleMissingError, RuleEngineError

# Violations only; passes / incomplete / inapplicable are not collected.
AXE_RUN_SCRIPT = """
async () => {
  return await window.axe.run(document, { resultTypes: ["violations"] });
}
"""


def resolve_bundle(script_path: Path | str | None = None) -> Path:
    """Return the axe bundle path, raising if the file is missing."""
    path = Path(script_path) if script_path is not None else settings.axe_script_path
    if not path.is_file():
        raise AxeBundleMissingError(
            f"axe-core bundle not found at {path}. Run `a11y-scan axe fetch` to download it."
        )
    return path


async def run_axe(page: Page, script_path: Path | str | None = None) -> dict[str, Any]:
    """Inject the axe bundle into *page* and return ``axe.run``'s result.

    Raises:
        AxeBundleMissingError: If the bundle file does not exist.
        RuleEngineError: If injection or the audit itself fails.
    """
    bundle = resolve_bundle(script_path)

    try:
        await page.add_script_tag(path=str(bundle))
        result = await page.evaluate(AXE_RUN_SCRIPT)
    except PlaywrightError as exc:
        raise RuleEngineError(exc.message) from exc

    if not isinstance(result, dict):
        raise RuleEngineError(f"Unexpected axe result type: {type(result).__name__}")
    return result
