"""
Pytest configuration and shared fixtures for fuzzyrank tests.

This module provides common fixtures that keep tests independent of the
developer's environment: FUZZYRANK_* variables, a local .env file, the
CLI context and logger handlers installed by the CLI.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from fuzzyrank.cli.common.context import clear_cli_context
from fuzzyrank.config.models.scoring_config import ScoringConfig
from fuzzyrank.shared.constants import Application, Logging


def _fuzzyrank_env_names() -> list[str]:
    return [name for name in os.environ if name.startswith(Application.ENV_PREFIX)]


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Generator[Path, None, None]:
    """Run every test in an empty working directory with no FUZZYRANK_* variables.

    Yields:
        The temporary working directory.
    """
    for name in _fuzzyrank_env_names():
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    clear_cli_context()

    yield tmp_path

    # load_dotenv writes straight into os.environ
    for name in _fuzzyrank_env_names():
        del os.environ[name]
    clear_cli_context()

    logger = logging.getLogger(Logging.DEFAULT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def default_config() -> ScoringConfig:
    """Scoring configuration with every default weight."""
    return ScoringConfig()


@pytest.fixture
def flat_config() -> ScoringConfig:
    """Scoring configuration where every alignment scores zero."""
    return ScoringConfig(
        sequential_bonus=0,
        separator_bonus=0,
        camel_case_bonus=0,
        first_letter_bonus=0,
        unmatched_letter_penalty=0,
        leading_letter_penalty=0,
        max_leading_letter_penalty=0,
    )


@pytest.fixture
def fruit() -> list[str]:
    """Candidate list used by the ranking examples."""
    return ["apple", "banana", "orange", "pear", "pineapple", "strawberry"]


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """TOML settings file raising the sequential bonus to 50.

    Returns:
        Path to the written file.
    """
    path = tmp_path / "fuzzyrank.toml"
    path.write_text(
        "[scoring]\nsequential_bonus = 50\n\n[logging]\nlevel = \"warning\"\n",
        encoding="utf-8",
    )
    return path
