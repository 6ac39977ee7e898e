"""JSON file loading with clear error reporting.

This module loads structure requests, price books and span tables from
JSON files. File system errors, JSON syntax errors and pydantic
validation errors are all turned into ConfigError with a message that
points at the problem.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from deckframe.domain.services.pricing import PriceBook
from deckframe.domain.services.span_tables import SpanTables

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised when a JSON input file cannot be used.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation, ...)
        path: Path to the file (if applicable)
        details: Additional error details (line/column for JSON, validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a dotted path.

    Examples:
        >>> _format_json_path(("lumber", "2x8", "cost_per_foot"))
        'lumber.2x8.cost_per_foot'
    """
    return ".".join(str(segment) for segment in loc)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(label: str, details: list[dict[str, Any]]) -> str:
    lines = [f"{label} validation failed:"]
    for detail in details:
        lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_json(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        ConfigError: error_type "file_not_found", "file_read_error" or
            "json_parse".
    """
    if not path.exists():
        raise ConfigError(
            message=f"File not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_request(path: Path) -> dict[str, Any]:
    """Load a structure request record.

    The record is returned as-is; the engine validates its fields so that
    every problem is reported together.
    """
    data = load_json(path)
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Request file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )
    return data


def _load_model(path: Path, model: type[ModelT], label: str) -> ModelT:
    data = load_json(path)
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(label, details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_price_book(path: Path) -> PriceBook:
    """Load a complete price book override from JSON."""
    return _load_model(path, PriceBook, "Price book")


def load_span_tables(path: Path) -> SpanTables:
    """Load complete span tables from JSON (values in decimal feet)."""
    return _load_model(path, SpanTables, "Span tables")
