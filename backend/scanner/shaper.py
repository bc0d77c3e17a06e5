"""Maps raw axe-core output onto the stable :class:`Violation` schema."""

from __future__ import annotations

from typing import Any, Mapping

from backend.scanner.models import Violation, ViolationNode


def _shape_node(raw: Mapping[str, Any]) -> ViolationNode:
    target = raw.get("target")
    return ViolationNode(
        html=raw.get("html"),
        target=list(target) if target is not None else None,
        failure_summary=raw.get("failureSummary"),
    )


def _shape_violation(raw: Mapping[str, Any]) -> Violation:
    return Violation(
        id=raw["id"],
        impact=raw.get("impact"),
        description=raw.get("description", ""),
        help=raw.get("help", ""),
        help_url=raw.get("helpUrl"),
        tags=list(raw.get("tags") or []),
        nodes=[_shape_node(n) for n in raw.get("nodes") or []],
    )


def shape_violations(result: Mapping[str, Any]) -> list[Violation]:
    """Convert an ``axe.run`` result into a list of :class:`Violation`.

    Fields are renamed and defaulted only: nothing is filtered, sorted or
    de-duplicated, so the output preserves the engine's order and length.
    """
    return [_shape_violation(v) for v in result.get("violations") or []]
