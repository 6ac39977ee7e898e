"""CLI command implementations for the deckframe application.

This package contains subcommands for the deckframe CLI, including:
- validate: Validate a structure request file
- tables: Print the built-in span tables
"""

from deckframe.cli.commands.tables import tables_command
from deckframe.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "tables_command", "validate_command"]
