"""Tests for the init command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from blogadmin.cli import cli


class TestInitCommand:
    def test_init_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "site"
        result = cli_runner.invoke(cli, ["init", str(target), "--name", "Site"])
        assert result.exit_code == 0, result.output
        assert "OK: init" in result.output
        assert (target / "blogadmin.toml").is_file()
        assert (target / "var" / "blogadmin.db").is_file()

    def test_init_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "init", str(tmp_path), "--database", "data/b.db"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "init"
        assert data["data"]["database"] == str((tmp_path / "data" / "b.db").resolve())

    @pytest.mark.usefixtures("_isolated_project")
    def test_init_cwd_defaults_name_to_directory(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        text = (tmp_path / "blogadmin.toml").read_text(encoding="utf-8")
        assert f'name = "{tmp_path.resolve().name}"' in text

    def test_init_twice_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, ["init", str(tmp_path)])
        result = cli_runner.invoke(cli, ["init", str(tmp_path)])
        assert result.exit_code == 0
        assert "WARNING: blogadmin.toml already exists" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["init", "--examples"])
        assert result.exit_code == 0
        assert "blogadmin init /srv/blog" in result.output
