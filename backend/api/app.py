"""FastAPI application factory.

Lifespan
--------
On startup the app checks that the axe-core bundle is in place and logs a
warning if it is not; scans will fail with ``ok: false`` until it is
provisioned (``a11y-scan axe fetch``).  No state is shared between requests:
every scan launches and closes its own browser.

Routers
-------
    /api/scan     — single-page accessibility scan
    /api/guides   — static remediation guides
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routers import guides as guides_router
from backend.api.routers import scan as scan_router
from backend.config import settings
from backend.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Report the rule-engine bundle status on startup."""
    if settings.axe_bundle_available():
        logger.info("Using axe-core bundle at %s", settings.axe_script_path)
    else:
        logger.warning(
            "axe-core bundle missing at %s; scans will fail until it is installed",
            settings.axe_script_path,
        )
    yield


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="A11y Scan API",
        description=(
            "Scans a single web page with axe-core in headless Chromium and "
            "returns its accessibility violations, plus remediation guides "
            "for common rules."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(scan_router.router, prefix="/api", tags=["scan"])
    app.include_router(guides_router.router, prefix="/api/guides", tags=["guides"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
