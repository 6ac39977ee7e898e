"""Validate command for checking structure request files.

This module provides the `validate` command that checks a JSON request
file and lists every problem found.
"""

from pathlib import Path
from typing import Annotated

import typer

from deckframe.application.config import ConfigError, load_request
from deckframe.application.validation import ValidationResult, validate_request


def display_load_error(error: ConfigError) -> None:
    """Display a file loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.field}: {error.message} [{error.code.value}]", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(result.errors)} error(s)", err=True)
    else:
        typer.echo("Validation passed. Request is valid.")


def validate_command(
    request_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON structure request to validate"),
    ],
) -> None:
    """Validate a deck structure request file.

    Checks the file for JSON syntax errors, missing fields, invalid types
    and values, and illegal field combinations.

    Exit codes:
        0 - Request is valid
        1 - Request has errors

    Example:
        deckframe validate my-deck.json
    """
    typer.echo(f"Validating {request_file}...")
    typer.echo()

    try:
        data = load_request(request_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_request(data)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
