"""Integration tests for CLI doctor command."""

from __future__ import annotations

from typer.testing import CliRunner

from wav2syx.cli import cli as cli_module


def test_doctor_command_runs_and_prints_python() -> None:
    """Run doctor command and assert baseline diagnostics are present."""
    runner = CliRunner()
    result = runner.invoke(cli_module.app, ["doctor"])

    assert result.exit_code == 0
    assert "Python:" in result.output
    assert "pydantic:" in result.output
    assert "sox:" in result.output


def test_doctor_reports_missing_sox() -> None:
    """Report an unresolvable sox binary."""
    runner = CliRunner()
    result = runner.invoke(
        cli_module.app, ["doctor", "--sox-binary", "definitely-not-a-real-sox"]
    )

    assert result.exit_code == 0
    assert "sox: <not found>" in result.output
