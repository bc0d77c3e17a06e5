"""A11y Scan CLI — entry-point for all backend operations.

Usage:
    python cli/main.py --help

Commands:
    scan      → audit one page with axe-core
    guides    → browse remediation guides
    axe       → provision the axe-core bundle
    serve     → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.commands.axe import axe_app
from cli.commands.guides import guides_app
from cli.commands.scan import scan_command

app = typer.Typer(
    name="a11y-scan",
    help="Single-page accessibility scanner built on axe-core.",
    no_args_is_help=True,
)

app.command("scan")(scan_command)
app.add_typer(guides_app, name="guides")
app.add_typer(axe_app, name="axe")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("backend.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
