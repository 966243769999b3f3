"""Tests for settings loading, environment overrides and saving."""

from pathlib import Path

import pytest
import toml

from fuzzyrank.config import LoggingSettings, Settings, load_settings, save_settings
from fuzzyrank.shared.errors import ApplicationError, ErrorCode


class TestLoadSettings:
    """Test load_settings sources and precedence."""

    def test_defaults_without_file(self):
        settings = load_settings()

        assert settings.scoring.sequential_bonus == 30
        assert settings.logging.level == "INFO"
        assert settings.logging.file is None

    def test_toml_values(self, settings_file: Path):
        settings = load_settings(settings_file)

        assert settings.scoring.sequential_bonus == 50
        assert settings.scoring.separator_bonus == 30
        assert settings.logging.level == "WARNING"

    def test_environment_overrides_toml(self, settings_file: Path, monkeypatch):
        monkeypatch.setenv("FUZZYRANK_SCORING__SEQUENTIAL_BONUS", "40")

        settings = load_settings(settings_file)

        assert settings.scoring.sequential_bonus == 40
        assert settings.logging.level == "WARNING"

    def test_environment_without_file(self, monkeypatch):
        monkeypatch.setenv("FUZZYRANK_SCORING__MAX_RECURSION_DEPTH", "3")
        monkeypatch.setenv("FUZZYRANK_LOGGING__LEVEL", "debug")

        settings = load_settings()

        assert settings.scoring.max_recursion_depth == 3
        assert settings.logging.level == "DEBUG"

    def test_dotenv_file(self, tmp_path: Path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("FUZZYRANK_SCORING__FIRST_LETTER_BONUS=20\n", encoding="utf-8")

        settings = load_settings(env_file=env_file)

        assert settings.scoring.first_letter_bonus == 20

    def test_dotenv_in_working_directory(self, isolated_environment: Path):
        (isolated_environment / ".env").write_text(
            "FUZZYRANK_SCORING__CAMEL_CASE_BONUS=5\n",
            encoding="utf-8",
        )

        assert load_settings().scoring.camel_case_bonus == 5

    def test_environment_beats_dotenv(self, tmp_path: Path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("FUZZYRANK_SCORING__FIRST_LETTER_BONUS=20\n", encoding="utf-8")
        monkeypatch.setenv("FUZZYRANK_SCORING__FIRST_LETTER_BONUS", "25")

        assert load_settings(env_file=env_file).scoring.first_letter_bonus == 25

    def test_missing_file(self, tmp_path: Path):
        missing = tmp_path / "missing.toml"

        with pytest.raises(ApplicationError) as exc_info:
            load_settings(missing)

        assert exc_info.value.code == ErrorCode.CONFIG_MISSING
        assert exc_info.value.context.file_path == str(missing)
        assert isinstance(exc_info.value.original_error, FileNotFoundError)

    def test_malformed_toml(self, tmp_path: Path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[scoring\nsequential_bonus = ", encoding="utf-8")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings(bad)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_invalid_values(self, tmp_path: Path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[scoring]\nsequential_bonus = -5\n", encoding="utf-8")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings(bad)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert "1 validation error" in exc_info.value.message

    def test_unknown_scoring_key(self, tmp_path: Path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[scoring]\nsequential = 40\n", encoding="utf-8")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings(bad)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("FUZZYRANK_SCORING__SEQUENTIAL_BONUS", "lots")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings()

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID


class TestSaveSettings:
    """Test writing settings back to TOML."""

    def test_round_trip_through_file(self, tmp_path: Path):
        settings = Settings(
            scoring={"sequential_bonus": 45},
            logging=LoggingSettings(level="ERROR"),
        )
        path = tmp_path / "nested" / "out.toml"

        assert save_settings(settings, path) == path
        assert load_settings(path) == settings

    def test_written_file_omits_unset_log_file(self, tmp_path: Path):
        path = save_settings(Settings(), tmp_path / "out.toml")

        data = toml.load(path)
        assert data["scoring"]["max_recursion_depth"] == 10
        assert "file" not in data["logging"]


class TestLoggingSettings:
    """Test logging settings validation."""

    def test_level_normalized(self):
        assert LoggingSettings(level="warning").level == "WARNING"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingSettings(level="LOUD")
