"""Tests for the timedelta CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from intervalds.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestTimedeltaCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "timedelta", "+1 02:03:04.5"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["timedelta"] == "1 day, 2:03:04.500000"
        assert data["total_seconds"] == 93784.5

    def test_human_lists_fields(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["timedelta", "+0 00:00:01"])
        assert result.exit_code == 0
        assert "timedelta: 0:00:01" in result.output

    def test_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["timedelta", "+0 00:00"])
        assert result.exit_code == 1
