"""Commands for managing the axe-core browser bundle."""

from __future__ import annotations

import httpx
import typer

from backend.config import settings
from backend.scanner.assets import ensure_axe_bundle

axe_app = typer.Typer(help="Manage the axe-core rule engine bundle.")


@axe_app.command("fetch")
def axe_fetch(
    force: bool = typer.Option(False, "--force", help="Re-download even if the bundle exists."),
) -> None:
    """Download axe.min.js to the configured AXE_SCRIPT_PATH."""
    try:
        path = ensure_axe_bundle(force=force)
    except httpx.HTTPError as exc:
        typer.echo(f"[axe fetch] Download failed: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"[axe fetch] Bundle ready at {path}")


@axe_app.command("status")
def axe_status() -> None:
    """Report whether the axe bundle is installed."""
    if settings.axe_bundle_available():
        typer.echo(f"[axe status] Installed: {settings.axe_script_path}")
    else:
        typer.echo(f"[axe status] Missing: {settings.axe_script_path}")
        raise typer.Exit(code=1)
