"""In-memory filtering and summary of a scan's violation list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from backend.scanner.models import Violation

IMPACT_RANK: dict[str, int] = {
    "minor": 1,
    "moderate": 2,
    "serious": 3,
    "critical": 4,
}

MIN_IMPACT_CHOICES: tuple[str, ...] = ("all", "moderate", "serious", "critical")


@dataclass(frozen=True)
class ScanSummary:
    total: int
    critical: int
    serious: int


def passes_impact(impact: str | None, min_impact: str = "all") -> bool:
    """Return ``True`` if *impact* is at least *min_impact*.

    A violation without an impact ranks as ``minor``; unknown values rank 0.
    """
    if min_impact == "all":
        return True
    rank = IMPACT_RANK.get(impact or "minor", 0)
    return rank >= IMPACT_RANK[min_impact]


def matches_query(violation: Violation, query: str) -> bool:
    """Case-insensitive substring match over id, help, description and tags."""
    q = query.strip().lower()
    if not q:
        return True
    return (
        q in violation.id.lower()
        or q in violation.help.lower()
        or q in violation.description.lower()
        or q in ",".join(violation.tags).lower()
    )


def filter_violations(
    violations: Iterable[Violation],
    min_impact: str = "all",
    query: str = "",
) -> list[Violation]:
    """Keep violations passing both the impact threshold and the text query.

    Order is preserved.
    """
    if min_impact != "all" and min_impact not in IMPACT_RANK:
        raise ValueError(f"Unknown impact level: {min_impact!r}")
    return [
        v
        for v in violations
        if passes_impact(v.impact, min_impact) and matches_query(v, query)
    ]


def summarize(violations: Iterable[Violation]) -> ScanSummary:
    items = list(violations)
    return ScanSummary(
        total=len(items),
        critical=sum(1 for v in items if v.impact == "critical"),
        serious=sum(1 for v in items if v.impact == "serious"),
    )
