"""Tables command for printing the built-in joist span table."""

from typing import Annotated

import typer

from deckframe.domain.services.span_tables import default_span_tables
from deckframe.domain.value_objects import SpeciesGrade
from deckframe.infrastructure.formatters import SpanTableFormatter


def tables_command(
    species: Annotated[
        SpeciesGrade | None,
        typer.Option("--species", "-s", help="Species/grade to show (default: all)"),
    ] = None,
) -> None:
    """Show allowable joist spans by size and spacing."""
    tables = default_span_tables()
    formatter = SpanTableFormatter()
    selected = [species] if species is not None else list(SpeciesGrade)
    for index, grade in enumerate(selected):
        if index:
            typer.echo()
        typer.echo(formatter.format(tables, grade))
