"""Allow running fuzzyrank as ``python -m fuzzyrank``."""

import sys

from fuzzyrank.cli.typer_app import app
from fuzzyrank.shared.constants import CLIDefaults


def main() -> int:
    """Run the CLI, mapping Ctrl-C onto the conventional exit code."""
    try:
        app()
    except KeyboardInterrupt:
        sys.stderr.write("Interrupted\n")
        return CLIDefaults.EXIT_INTERRUPTED
    return CLIDefaults.EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
