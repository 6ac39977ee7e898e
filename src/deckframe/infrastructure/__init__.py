"""Infrastructure layer - output formatting and export."""

from deckframe.infrastructure.formatters import (
    FORMATS,
    ComplianceFormatter,
    CsvTakeoffExporter,
    JsonExporter,
    SpanTableFormatter,
    StructureReportFormatter,
    TakeoffReportFormatter,
    ValidationFormatter,
    render,
)

__all__ = [
    "ComplianceFormatter",
    "CsvTakeoffExporter",
    "FORMATS",
    "JsonExporter",
    "SpanTableFormatter",
    "StructureReportFormatter",
    "TakeoffReportFormatter",
    "ValidationFormatter",
    "render",
]
