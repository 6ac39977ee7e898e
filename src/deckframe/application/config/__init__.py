"""Request schema and loading of requests and reference data from JSON files."""

from .loader import (
    ConfigError,
    load_json,
    load_price_book,
    load_request,
    load_span_tables,
)
from .schemas import StructureRequestSchema

__all__ = [
    "ConfigError",
    "StructureRequestSchema",
    "load_json",
    "load_price_book",
    "load_request",
    "load_span_tables",
]
