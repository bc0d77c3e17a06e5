"""URL normalisation for user-supplied scan targets."""

from __future__ import annotations

import re

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(raw: str) -> str:
    """Trim *raw* and prepend ``https://`` when it has no http(s) scheme.

    No host validation happens here; bad hosts surface during navigation.
    """
    trimmed = raw.strip()
    if not _SCHEME_RE.match(trimmed):
        return f"https://{trimmed}"
    return trimmed
