"""Config command handler for fuzzyrank CLI."""

from __future__ import annotations

from pathlib import Path

import typer

from fuzzyrank.cli.common.context import get_cli_context
from fuzzyrank.cli.common.error_handler import format_json_output
from fuzzyrank.cli.output import console, render_scoring_config
from fuzzyrank.config import save_settings
from fuzzyrank.shared.constants import CLICommands


def config_command(write_path: Path | None = None) -> None:
    """Show the effective scoring configuration, optionally saving it.

    Args:
        write_path: If given, write the effective settings there as TOML
    """
    context = get_cli_context()
    settings = context.load_settings()

    saved_to = save_settings(settings, write_path) if write_path is not None else None

    if context.is_json_output_enabled():
        data = {
            "scoring": settings.scoring.model_dump(),
            "logging": settings.logging.model_dump(),
            "saved_to": str(saved_to) if saved_to else None,
        }
        typer.echo(format_json_output(CLICommands.CONFIG, success=True, data=data))
        return

    render_scoring_config(settings.scoring)
    if saved_to is not None:
        console.print(f"[green]Settings saved to {saved_to}[/green]")
