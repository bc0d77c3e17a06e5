"""The ``scan`` command: audit one URL and print its violations."""

from __future__ import annotations

import asyncio
import json

import typer

from backend.scanner import scan
from backend.scanner.filters import MIN_IMPACT_CHOICES, filter_violations, summarize
from cli.rendering import render_summary, render_violation


def scan_command(
    url: str = typer.Argument(..., help="Page to scan (scheme defaults to https://)."),
    min_impact: str = typer.Option(
        "all",
        "--min-impact",
        help="Only show violations at or above this impact: all | moderate | serious | critical.",
    ),
    query: str = typer.Option(
        "", "--query", "-q", help="Only show violations whose id/help/description/tags contain this text."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw scan response as JSON."),
    guides: bool = typer.Option(True, "--guides/--no-guides", help="Show fix guides under each violation."),
) -> None:
    """Scan a single page with axe-core and list its accessibility violations."""
    if min_impact not in MIN_IMPACT_CHOICES:
        typer.echo(
            f"[scan] Invalid --min-impact {min_impact!r}; choose from {', '.join(MIN_IMPACT_CHOICES)}.",
            err=True,
        )
        raise typer.Exit(code=2)

    result = asyncio.run(scan(url))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            raise typer.Exit(code=1)
        return

    if not result.ok:
        typer.echo(f"[scan] ❌ Scan of {result.url} failed: {result.error}", err=True)
        raise typer.Exit(code=1)

    shown = filter_violations(result.violations, min_impact=min_impact, query=query)
    typer.echo(f"[scan] {result.url}  ({result.timestamp})")
    typer.echo(f"[scan] {render_summary(summarize(result.violations), len(shown))}")

    if not result.violations:
        typer.echo("[scan] ✅ No violations found.")
        return

    for violation in shown:
        typer.echo("")
        typer.echo(render_violation(violation, with_guide=guides))
