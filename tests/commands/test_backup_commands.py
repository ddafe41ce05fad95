"""Tests for the backup command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tierctl.cli import cli


@pytest.mark.usefixtures("_isolated_workspace")
class TestBackupExport:
    def test_default_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["backup", "export"])
        assert result.exit_code == 0
        assert (tmp_path / "tier-list.json").is_file()

    def test_stdout(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["backup", "export", "--stdout"])
        assert result.exit_code == 0
        doc = json.loads(result.stdout)
        assert set(doc) == {"savedRows", "savedItems"}
        assert not (tmp_path / "tier-list.json").exists()

    def test_stdout_json_mode_wraps_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "backup", "export", "--stdout"])
        data = json.loads(result.stdout)
        assert data["op"] == "export"
        assert "savedRows" in json.loads(data["data"]["content"])


@pytest.mark.usefixtures("_isolated_workspace")
class TestBackupRestore:
    def test_round_trip(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["tier", "move", "D", "0"])
        cli_runner.invoke(cli, ["backup", "export", "saved.json"])
        cli_runner.invoke(cli, ["reset", "--yes"])

        result = cli_runner.invoke(cli, ["--json", "backup", "restore", "saved.json", "--yes"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [t["id"] for t in data["data"]["tiers"]] == ["D", "S", "A", "B", "C"]

    def test_requires_confirmation(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["backup", "export", "saved.json"])
        result = cli_runner.invoke(cli, ["backup", "restore", "saved.json"])
        assert result.exit_code == 1
        assert "--yes" in result.stderr

    def test_malformed(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text("not json at all")
        result = cli_runner.invoke(cli, ["--json", "backup", "restore", "bad.json", "--yes"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert json.loads(result.stderr)["error"]["code"] == "MALFORMED_SNAPSHOT"
