"""FastAPI HTTP layer package (``/api/scan``, ``/api/guides``).

Public re-export so callers can write::

    uvicorn backend.api:app
"""

from backend.api.app import app

__all__ = ["app"]
