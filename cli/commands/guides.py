"""Fix-guide commands."""

from __future__ import annotations

import typer

from backend.guides import FIX_GUIDES, get_guide
from cli.rendering import render_guide

guides_app = typer.Typer(help="Browse remediation guides for axe-core rules.")


@guides_app.command("list")
def guides_list() -> None:
    """List every rule id that has a fix guide."""
    for rule_id in sorted(FIX_GUIDES):
        typer.echo(f"{rule_id:<20} {FIX_GUIDES[rule_id].title}")


@guides_app.command("show")
def guides_show(
    rule_id: str = typer.Argument(..., help="axe-core rule id, e.g. image-alt."),
) -> None:
    """Show the fix guide for one rule."""
    guide = get_guide(rule_id)
    if guide is None:
        typer.echo(f"[guides show] No guide for rule {rule_id!r}.", err=True)
        raise typer.Exit(code=1)

    typer.echo(rule_id)
    typer.echo("\n".join(render_guide(guide, indent="")))
    if guide.example:
        typer.echo("\nExample:")
        typer.echo(guide.example)
