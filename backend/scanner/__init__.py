"""Scanner package — axe-core accessibility audits in headless Chromium.

Public API::

    from backend.scanner import scan
    response = await scan("example.com")
"""

from backend.scanner.models import ScanResponse, Violation, ViolationNode
from backend.scanner.service import scan
from backend.scanner.urls import normalize_url

__all__ = ["scan", "normalize_url", "ScanResponse", "Violation", "ViolationNode"]
