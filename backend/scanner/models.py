"""Data models for the scan pipeline.

Plain frozen dataclasses, serialised to the JSON wire format with
``to_dict()``.  Optional members left as ``None`` are omitted from the
serialised dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

Impact = Literal["minor", "moderate", "serious", "critical"]

IMPACT_LEVELS: tuple[str, ...] = ("minor", "moderate", "serious", "critical")


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class ViolationNode:
    """One offending DOM location reported for a violation."""

    html: str | None = None
    target: list[str] | None = None
    failure_summary: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "html": self.html,
                "target": self.target,
                "failureSummary": self.failure_summary,
            }
        )


@dataclass(frozen=True)
class Violation:
    """A single axe-core rule failure."""

    id: str
    description: str
    help: str
    impact: Impact | None = None
    help_url: str | None = None
    tags: list[str] = field(default_factory=list)
    nodes: list[ViolationNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "impact": self.impact,
                "description": self.description,
                "help": self.help,
                "helpUrl": self.help_url,
                "tags": list(self.tags),
                "nodes": [node.to_dict() for node in self.nodes],
            }
        )


@dataclass(frozen=True)
class ScanResponse:
    """Outcome of one scan.

    A failed response always has an empty ``violations`` list and a
    non-empty ``error``; a successful one never carries an ``error``.
    """

    ok: bool
    violations: list[Violation] = field(default_factory=list)
    url: str | None = None
    timestamp: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.ok and self.error is not None:
            raise ValueError("A successful ScanResponse cannot carry an error.")
        if not self.ok and (self.violations or not self.error):
            raise ValueError(
                "A failed ScanResponse needs an error message and no violations."
            )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def success(cls, url: str, violations: list[Violation]) -> ScanResponse:
        return cls(ok=True, url=url, timestamp=utc_timestamp(), violations=list(violations))

    @classmethod
    def failure(
        cls,
        error: str,
        url: str | None = None,
        timestamp: str | None = None,
    ) -> ScanResponse:
        return cls(ok=False, url=url, timestamp=timestamp, violations=[], error=error)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "ok": self.ok,
                "url": self.url,
                "timestamp": self.timestamp,
                "violations": [v.to_dict() for v in self.violations],
                "error": self.error,
            }
        )
