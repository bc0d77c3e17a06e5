"""Utilities for rendering scan results in the CLI."""

from __future__ import annotations

from typing import List

from backend.guides import FixGuide, get_guide
from backend.scanner.filters import ScanSummary
from backend.scanner.models import Violation


def render_summary(summary: ScanSummary, shown: int) -> str:
    """One-line overview, e.g. ``5 violation(s) — 1 critical, 2 serious (showing 3)``."""
    line = (
        f"{summary.total} violation(s) — "
        f"{summary.critical} critical, {summary.serious} serious"
    )
    if shown != summary.total:
        line += f" (showing {shown})"
    return line


def render_guide(guide: FixGuide, indent: str = "    ") -> List[str]:
    lines = [f"{indent}🛠  {guide.title}", f"{indent}   Why: {guide.why}"]
    for step in guide.how:
        lines.append(f"{indent}   - {step}")
    for link in guide.links:
        lines.append(f"{indent}   ↗ {link.label}: {link.href}")
    return lines


def render_violation(violation: Violation, with_guide: bool = True) -> str:
    """Render a single violation block, with its fix guide when one exists."""
    impact = violation.impact or "unknown"
    lines = [
        f"{_get_icon(violation.impact)} [{impact}] {violation.id}: {violation.help}",
        f"    {violation.description}",
    ]
    if violation.help_url:
        lines.append(f"    More info: {violation.help_url}")
    if violation.tags:
        lines.append(f"    Tags: {', '.join(violation.tags)}")

    for node in violation.nodes:
        target = " ".join(node.target) if node.target else "?"
        lines.append(f"    • {target}")
        if node.html:
            lines.append(f"      {node.html}")

    if with_guide:
        guide = get_guide(violation.id)
        if guide is not None:
            lines.extend(render_guide(guide))

    return "\n".join(lines)


def _get_icon(impact: str | None) -> str:
    icons = {
        "critical": "🔴",
        "serious": "🟠",
        "moderate": "🟡",
        "minor": "🔵",
    }
    return icons.get(impact or "", "⚪")
