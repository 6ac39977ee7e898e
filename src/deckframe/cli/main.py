"""Typer CLI for deck structure design."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer

from deckframe.application.config import (
    ConfigError,
    load_price_book,
    load_request,
    load_span_tables,
)
from deckframe.application.engine import StructureEngine
from deckframe.cli.commands import display_load_error, tables_command, validate_command
from deckframe.domain.errors import EngineError, EngineErrorCode
from deckframe.infrastructure.formatters import FORMATS, render

T = TypeVar("T")

app = typer.Typer(
    name="deckframe",
    help="Select code-compliant deck joists, beams and posts and list the materials.",
)

app.command(name="validate")(validate_command)
app.command(name="tables")(tables_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def merge_request_with_cli(
    data: dict[str, Any], overrides: dict[str, Any]
) -> dict[str, Any]:
    """Overlay CLI options on a request record; None means "not given"."""
    merged = dict(data)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def _load_or_exit(loader: Callable[[Path], T], path: Path | None) -> T | None:
    if path is None:
        return None
    try:
        return loader(path)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


@app.command()
def compute(
    request_file: Annotated[
        Path | None,
        typer.Argument(help="Path to a JSON structure request"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Deck width in feet")
    ] = None,
    length: Annotated[
        float | None, typer.Option("--length", "-l", help="Deck length in feet")
    ] = None,
    height: Annotated[
        float | None, typer.Option("--height", help="Deck height above grade in feet")
    ] = None,
    attachment: Annotated[
        str | None, typer.Option("--attachment", help="ledger or free")
    ] = None,
    footing: Annotated[
        str | None, typer.Option("--footing", help="helical, concrete or surface")
    ] = None,
    species: Annotated[
        str | None, typer.Option("--species", help='e.g. "SPF #2", "DF #1"')
    ] = None,
    decking: Annotated[
        str | None,
        typer.Option("--decking", help="composite_1in, wood_5/4 or wood_2x"),
    ] = None,
    spacing: Annotated[
        int | None, typer.Option("--spacing", help="Force joist spacing: 12, 16 or 24")
    ] = None,
    goal: Annotated[
        str | None, typer.Option("--goal", help="cost or strength")
    ] = None,
    outer_style: Annotated[
        str | None, typer.Option("--outer-style", help="Outer beam: drop or inline")
    ] = None,
    inner_style: Annotated[
        str | None, typer.Option("--inner-style", help="Inner beam: drop or inline")
    ] = None,
    prices_file: Annotated[
        Path | None, typer.Option("--prices", help="JSON price book override")
    ] = None,
    span_tables_file: Annotated[
        Path | None, typer.Option("--span-tables", help="JSON span tables override")
    ] = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json or csv")
    ] = "text",
    output_file: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write output to a file")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show selection details")
    ] = False,
) -> None:
    """Compute joists, beams, posts, materials and compliance for a deck.

    Example:
        deckframe compute my-deck.json --format json
        deckframe compute --width 12 --length 16 --height 2 --attachment ledger \\
            --footing concrete --species "SPF #2" --decking composite_1in
    """
    _configure_logging(verbose)

    if output_format not in FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(FORMATS)}", err=True)
        raise typer.Exit(code=1)

    data: dict[str, Any] = {}
    if request_file is not None:
        data = _load_or_exit(load_request, request_file)
    data = merge_request_with_cli(
        data,
        {
            "width_ft": width,
            "length_ft": length,
            "height_ft": height,
            "attachment": attachment,
            "footing_type": footing,
            "species_grade": species,
            "decking_type": decking,
            "forced_joist_spacing_in": spacing,
            "optimization_goal": goal,
            "beam_style_outer": outer_style,
            "beam_style_inner": inner_style,
        },
    )

    engine = StructureEngine(
        span_tables=_load_or_exit(load_span_tables, span_tables_file),
        prices=_load_or_exit(load_price_book, prices_file),
    )
    try:
        result = engine.compute(data)
    except EngineError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.code == EngineErrorCode.INVALID_INPUT:
            for detail in e.details:
                typer.echo(f"  {detail.field}: {detail.message}", err=True)
        raise typer.Exit(code=1)

    rendered = render(result, output_format)
    if output_file is not None:
        output_file.write_text(rendered, encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(rendered)

    if not result.compliance.passes and output_format == "text":
        typer.echo(
            f"{len(result.compliance.warnings)} compliance warning(s)", err=True
        )


if __name__ == "__main__":
    app()
