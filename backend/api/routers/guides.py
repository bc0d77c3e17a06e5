"""Fix-guide endpoints.

Routes
------
GET /api/guides              → [{rule_id, title}, ...]
GET /api/guides/{rule_id}    → full guide, 404 when unknown
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from backend.guides import FIX_GUIDES, get_guide

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class GuideSummary(BaseModel):
    rule_id: str
    title: str


class GuideLinkOut(BaseModel):
    label: str
    href: str


class GuideResponse(BaseModel):
    rule_id: str
    title: str
    why: str
    how: list[str]
    example: Optional[str] = None
    links: list[GuideLinkOut] = []


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=list[GuideSummary])
def list_guides() -> list[GuideSummary]:
    """List every rule id that has a fix guide, sorted by id."""
    return [
        GuideSummary(rule_id=rule_id, title=FIX_GUIDES[rule_id].title)
        for rule_id in sorted(FIX_GUIDES)
    ]


@router.get("/{rule_id}", response_model=GuideResponse)
def read_guide(rule_id: str) -> GuideResponse:
    """Return the fix guide for a single axe-core rule."""
    guide = get_guide(rule_id)
    if guide is None:
        raise HTTPException(status_code=404, detail=f"No fix guide for rule {rule_id!r}.")
    return GuideResponse(
        rule_id=rule_id,
        title=guide.title,
        why=guide.why,
        how=list(guide.how),
        example=guide.example,
        links=[GuideLinkOut(label=link.label, href=link.href) for link in guide.links],
    )
