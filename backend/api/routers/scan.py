"""Scan endpoint.

Routes
------
POST /api/scan    Body: {"url": "example.com"}    → ScanResponse

Status codes: 200 when the scan succeeded, 400 when ``url`` is missing or not
a string, 500 when the scan failed or the handler hit an unexpected error.
The body is always a ScanResponse-shaped object.
"""

from __future__ import annotations

import traceback

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from backend.logger import get_logger
from backend.scanner import ScanResponse, scan

logger = get_logger(__name__)

router = APIRouter()


@router.post("/scan")
async def scan_endpoint(request: Request) -> JSONResponse:
    """Run an axe-core audit of the submitted URL."""
    try:
        payload = await request.json()
        url = payload.get("url") if isinstance(payload, dict) else None

        if not url or not isinstance(url, str):
            return JSONResponse(
                ScanResponse.failure("Missing url").to_dict(), status_code=400
            )

        result = await scan(url)
        return JSONResponse(result.to_dict(), status_code=200 if result.ok else 500)
    except Exception as exc:
        logger.exception("Unhandled error in /api/scan")
        message = str(exc) or "Scan failed"
        return JSONResponse(
            ScanResponse.failure(f"{message}\n{traceback.format_exc()}").to_dict(),
            status_code=500,
        )
