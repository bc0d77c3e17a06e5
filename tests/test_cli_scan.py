"""Tests for the 'scan', 'guides' and 'serve' CLI commands."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from backend.scanner.models import ScanResponse, Violation, ViolationNode
from cli.main import app

runner = CliRunner()


def _result() -> ScanResponse:
    return ScanResponse.success(
        "https://example.com",
        [
            Violation(
                id="image-alt",
                impact="critical",
                description="Ensures <img> elements have alternate text",
                help="Images must have alternate text",
                help_url="https://dequeuniversity.com/rules/axe/4.10/image-alt",
                tags=["wcag2a", "wcag111"],
                nodes=[ViolationNode(html='<img src="/a.png">', target=["img"])],
            ),
            Violation(
                id="custom-rule",
                impact="minor",
                description="Something minor",
                help="Minor help",
            ),
        ],
    )


class TestScanCommand:
    def test_prints_summary_violations_and_guides(self) -> None:
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=_result())) as mock_scan:
            result = runner.invoke(app, ["scan", "example.com"])

        assert result.exit_code == 0, result.output
        mock_scan.assert_awaited_once_with("example.com")
        assert "2 violation(s)" in result.output
        assert "1 critical, 0 serious" in result.output
        assert "[critical] image-alt: Images must have alternate text" in result.output
        assert '<img src="/a.png">' in result.output
        assert "Images need alternative text" in result.output

    def test_min_impact_filters_output(self) -> None:
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=_result())):
            result = runner.invoke(app, ["scan", "example.com", "--min-impact", "serious"])

        assert result.exit_code == 0, result.output
        assert "(showing 1)" in result.output
        assert "custom-rule" not in result.output

    def test_query_filters_output(self) -> None:
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=_result())):
            result = runner.invoke(app, ["scan", "example.com", "-q", "minor help"])

        assert "custom-rule" in result.output
        assert "image-alt:" not in result.output

    def test_no_guides(self) -> None:
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=_result())):
            result = runner.invoke(app, ["scan", "example.com", "--no-guides"])

        assert "Images need alternative text" not in result.output

    def test_json_output(self) -> None:
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=_result())):
            result = runner.invoke(app, ["scan", "example.com", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert [v["id"] for v in data["violations"]] == ["image-alt", "custom-rule"]

    def test_no_violations(self) -> None:
        clean = ScanResponse.success("https://example.com", [])
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=clean)):
            result = runner.invoke(app, ["scan", "example.com"])

        assert result.exit_code == 0
        assert "No violations found" in result.output

    def test_failed_scan_exits_1(self) -> None:
        failed = ScanResponse.failure("net::ERR_NAME_NOT_RESOLVED", url="https://x.invalid", timestamp="t")
        with patch("cli.commands.scan.scan", new=AsyncMock(return_value=failed)):
            result = runner.invoke(app, ["scan", "x.invalid"])

        assert result.exit_code == 1
        assert "ERR_NAME_NOT_RESOLVED" in result.output

    def test_invalid_min_impact(self) -> None:
        with patch("cli.commands.scan.scan", new=AsyncMock()) as mock_scan:
            result = runner.invoke(app, ["scan", "example.com", "--min-impact", "urgent"])

        assert result.exit_code == 2
        mock_scan.assert_not_called()


class TestGuidesCommands:
    def test_list(self) -> None:
        result = runner.invoke(app, ["guides", "list"])
        assert result.exit_code == 0
        assert "image-alt" in result.output
        assert "Insufficient color contrast" in result.output

    def test_show(self) -> None:
        result = runner.invoke(app, ["guides", "show", "label"])
        assert result.exit_code == 0
        assert "Form controls need labels" in result.output
        assert "Example:" in result.output
        assert '<label for="email">Email</label>' in result.output

    def test_show_unknown(self) -> None:
        result = runner.invoke(app, ["guides", "show", "nope"])
        assert result.exit_code == 1


class TestServeCommand:
    def test_runs_uvicorn(self) -> None:
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9000"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(
            "backend.api.app:app", host="127.0.0.1", port=9000, reload=False
        )
