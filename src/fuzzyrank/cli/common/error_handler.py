"""
CLI Error Handling Utilities

This module provides utilities for consistent error handling across CLI commands,
including standardized error output formatting and exception mapping.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import typer

from fuzzyrank.shared.errors import (
    ApplicationError,
    CliError,
    DomainError,
    InfrastructureError,
    create_cli_error,
)
from fuzzyrank.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


def format_json_output(
    command: str,
    *,
    success: bool,
    errors: list[str] | None = None,
    data: dict[str, Any] | None = None,
) -> str:
    """Build the JSON envelope used for all --json output.

    Args:
        command: The command that was executed
        success: Whether the operation was successful
        errors: List of error messages
        data: Command payload

    Returns:
        JSON-formatted string
    """
    output: dict[str, Any] = {
        "success": success,
        "command": command,
    }

    if errors:
        output["errors"] = errors

    if data is not None:
        output["data"] = data

    return json.dumps(output, indent=2, ensure_ascii=False)


def handle_cli_error(
    error: Exception,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    error_context = _create_error_context(error, command, json_output=json_output)
    cli_error = _map_error_to_cli_error(error, command, error_context)
    _log_error(error, command, cli_error, error_context)
    _output_error(cli_error, error, command, error_context, json_output=json_output)

    return cli_error.exit_code


def _create_error_context(
    error: Exception,
    command: str,
    *,
    json_output: bool,
) -> dict[str, Any]:
    """Create structured error context for logging."""
    return {
        "command": command,
        "error_type": type(error).__name__,
        "json_output": json_output,
    }


def _map_error_to_cli_error(
    error: Exception,
    command: str,
    error_context: dict[str, Any],
) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        error_context["error_code"] = error.code.value
        return error

    if isinstance(error, ApplicationError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"Application error: {error.message}",
            code=error.code,
            command=command,
            original_error=error,
        )

    if isinstance(error, InfrastructureError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"Infrastructure error: {error.message}",
            code=error.code,
            command=command,
            original_error=error,
        )

    if isinstance(error, DomainError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"Validation error: {error.message}",
            code=error.code,
            command=command,
            original_error=error,
        )

    if isinstance(error, OSError):
        error_context["error_category"] = "file_system"
        return create_cli_error(
            message=f"File system error: {error}",
            command=command,
            original_error=error,
        )

    if isinstance(error, (ValueError, KeyError, TypeError)):
        error_context["error_category"] = "data_processing"
        return create_cli_error(
            message=f"Data processing error: {error}",
            command=command,
            original_error=error,
        )

    error_context["error_category"] = "unexpected"
    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error,
    )


def _log_error(
    error: Exception,
    command: str,
    cli_error: CliError,
    error_context: dict[str, Any],
) -> None:
    """Log the error with structured context."""
    if isinstance(error, CliError) and error.original_error is None:
        # Usage problems, not failures worth a traceback
        logger.warning(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"context": error_context},
        )
    else:
        log_operation_error(logger, cli_error, operation=command, context=error_context)


def _output_error(
    cli_error: CliError,
    error: Exception,
    command: str,
    error_context: dict[str, Any],
    *,
    json_output: bool,
) -> None:
    """Output error message in appropriate format."""
    if json_output:
        typer.echo(
            format_json_output(
                command,
                success=False,
                errors=[cli_error.message],
                data={
                    "error_code": cli_error.code.value,
                    "error_type": type(error).__name__,
                    "exit_code": cli_error.exit_code,
                    "context": error_context,
                },
            ),
        )
    else:
        sys.stderr.write(f"Error: {cli_error.message}\n")
