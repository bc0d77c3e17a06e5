"""Remediation guides for common axe-core rules.

Public API::

    from backend.guides import get_guide
    guide = get_guide("image-alt")
"""

from backend.guides.catalog import FIX_GUIDES, FixGuide, GuideLink, get_guide

__all__ = ["FIX_GUIDES", "FixGuide", "GuideLink", "get_guide"]
