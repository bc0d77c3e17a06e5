"""Exceptions raised by the scan pipeline.

The orchestrator catches all of these and turns them into a failed
:class:`~backend.scanner.models.ScanResponse`; they never reach HTTP callers.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base class for scan-pipeline failures."""


class NavigationError(ScanError):
    """The target page could not be loaded (DNS, TLS, timeout, crash)."""


class RuleEngineError(ScanError):
    """axe-core could not be injected or its audit failed."""


class AxeBundleMissingError(RuleEngineError):
    """The axe-core bundle is not present at the configured path."""
