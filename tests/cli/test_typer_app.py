"""
Test the Typer application end to end.

These tests drive the CLI through typer's CliRunner, covering the common
options handled by the main callback and every command in both human and
JSON output modes.
"""

import json
import logging
import re
from pathlib import Path

import pytest
import toml
from typer.testing import CliRunner

from fuzzyrank.cli.common.context import LogLevel, get_cli_context
from fuzzyrank.cli.typer_app import app, main_callback

runner = CliRunner()


def _plain(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


class TestMainCallback:
    """Test the common option processing."""

    def test_sets_context(self):
        main_callback(
            verbose=2,
            log_level=LogLevel.WARNING,
            json_output=True,
            version=False,
            config_path=None,
        )

        context = get_cli_context()
        assert context.verbose == 2
        assert context.log_level == LogLevel.WARNING
        assert context.json_output is True
        assert context.get_effective_log_level() == "DEBUG"

    def test_log_level_falls_back_to_settings(self, settings_file: Path):
        main_callback(
            verbose=0,
            log_level=None,
            json_output=False,
            version=False,
            config_path=settings_file,
        )

        assert get_cli_context().log_level == LogLevel.WARNING
        assert logging.getLogger("fuzzyrank").level == logging.WARNING

    def test_version_exits(self):
        with pytest.raises(Exception):  # typer.Exit
            main_callback(
                verbose=0,
                log_level=None,
                json_output=False,
                version=True,
                config_path=None,
            )


class TestVersion:
    """Test the --version flag."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "fuzzyrank CLI v0.1.0" in result.stdout


class TestMatchCommand:
    """Test `fuzzyrank match`."""

    def test_human_output(self):
        result = runner.invoke(app, ["match", "cars", "classic cars"])

        assert result.exit_code == 0
        assert "97" in _plain(result.stdout)

    def test_json_output(self):
        result = runner.invoke(app, ["--json", "match", "cars", "classic cars"])

        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["success"] is True
        assert output["data"]["score"] == 97
        assert output["data"]["matches"] == [8, 9, 10, 11]

    def test_explain(self):
        result = runner.invoke(app, ["--json", "match", "--explain", "fb", "FooBar"])

        assert result.exit_code == 0
        breakdown = json.loads(result.stdout)["data"]["breakdown"]
        assert breakdown["camel_case"] == 30
        assert breakdown["total"] == 41

    def test_config_file_weights(self, settings_file: Path):
        result = runner.invoke(
            app,
            ["--json", "--config", str(settings_file), "match", "cars", "classic cars"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["score"] == 97 + 3 * 20

    def test_environment_weights(self, monkeypatch):
        monkeypatch.setenv("FUZZYRANK_SCORING__SEPARATOR_BONUS", "0")

        result = runner.invoke(app, ["--json", "match", "cars", "classic cars"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["score"] == 67


class TestSortCommand:
    """Test `fuzzyrank sort`."""

    def test_json_ranking(self):
        result = runner.invoke(
            app,
            ["--json", "sort", "an", "apple", "banana", "orange", "pear", "pineapple", "strawberry"],
        )

        assert result.exit_code == 0
        results = json.loads(result.stdout)["data"]["results"]
        assert [entry["haystack"] for entry in results] == [
            "banana",
            "orange",
            "apple",
            "pear",
            "pineapple",
            "strawberry",
        ]

    def test_file_and_limit(self, tmp_path: Path):
        names = tmp_path / "names.txt"
        names.write_text("apple\nbanana\n\nstrawberry\n", encoding="utf-8")

        result = runner.invoke(
            app,
            ["--json", "sort", "--file", str(names), "--limit", "1", "an"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["total_candidates"] == 3
        assert [entry["haystack"] for entry in data["results"]] == ["banana"]

    def test_table_output(self):
        result = runner.invoke(app, ["sort", "an", "apple", "banana"])

        assert result.exit_code == 0
        assert "Ranking for 'an'" in _plain(result.stdout)

    def test_no_candidates_is_an_error(self):
        result = runner.invoke(app, ["sort", "an"])

        assert result.exit_code == 1
        assert "No candidates to rank" in result.output

    def test_no_candidates_json(self):
        result = runner.invoke(app, ["--json", "sort", "an"])

        assert result.exit_code == 1
        assert '"success": false' in result.output
        assert "CLI_INVALID_ARGUMENTS" in result.output

    def test_negative_limit_rejected(self):
        result = runner.invoke(app, ["sort", "--limit", "-1", "an", "apple"])

        assert result.exit_code == 2


class TestConfigCommand:
    """Test `fuzzyrank config`."""

    def test_json(self):
        result = runner.invoke(app, ["--json", "config"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["scoring"]["max_recursion_depth"] == 10
        assert data["saved_to"] is None

    def test_write(self, tmp_path: Path, settings_file: Path):
        target = tmp_path / "effective.toml"

        result = runner.invoke(
            app,
            ["--config", str(settings_file), "config", "--write", str(target)],
        )

        assert result.exit_code == 0
        written = toml.load(target)
        assert written["scoring"]["sequential_bonus"] == 50
        assert written["logging"]["level"] == "WARNING"

    def test_invalid_config_file(self, tmp_path: Path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[scoring]\nsequential_bonus = -1\n", encoding="utf-8")

        result = runner.invoke(app, ["--config", str(bad), "config"])

        assert result.exit_code == 1
        assert "Invalid settings in bad.toml" in result.output
