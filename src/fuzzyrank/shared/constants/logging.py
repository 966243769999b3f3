"""
Logging Configuration Constants

This module contains all constants related to logging configuration.
"""


class Logging:
    """Logging configuration constants."""

    DEFAULT_LOGGER_NAME = "fuzzyrank"
    DEFAULT_LEVEL = "INFO"
    DEFAULT_FILE_ENCODING = "utf-8"
    LOG_TIME_FORMAT = "[%H:%M:%S]"


class Application:
    """Environment variable and .env file conventions."""

    ENV_PREFIX = "FUZZYRANK_"
    ENV_NESTED_DELIMITER = "__"
    ENV_FILE = ".env"
