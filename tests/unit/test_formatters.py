"""Unit tests for output formatters."""

import csv
import io
import json

import pytest

from deckframe.application.dtos import StructureResult
from deckframe.application.engine import StructureEngine
from deckframe.application.validation import validate_request
from deckframe.domain.value_objects import SpeciesGrade
from deckframe.infrastructure import (
    CsvTakeoffExporter,
    SpanTableFormatter,
    ValidationFormatter,
    render,
)


@pytest.fixture
def result(engine: StructureEngine, ledger_request: dict) -> StructureResult:
    return engine.compute(ledger_request)


class TestRender:
    """Tests for render()."""

    def test_text(self, result: StructureResult) -> None:
        text = render(result, "text")
        assert "DECK STRUCTURE" in text
        assert "13 x 2x8 @ 16\" o.c." in text
        assert "(2)2x10" in text
        assert "MATERIAL TAKEOFF" in text
        assert "COMPLIANCE: PASS" in text

    def test_json(self, result: StructureResult) -> None:
        data = json.loads(render(result, "json"))
        assert data["joists"]["size"] == "2x8"
        assert data["compliance"]["passes"] is True

    def test_csv(self, result: StructureResult) -> None:
        rows = list(csv.reader(io.StringIO(render(result, "csv"))))
        assert tuple(rows[0]) == CsvTakeoffExporter.HEADER
        assert len(rows) == len(result.takeoff.items) + 1

    def test_unknown_format(self, result: StructureResult) -> None:
        with pytest.raises(ValueError):
            render(result, "xml")


class TestValidationFormatter:
    """Tests for ValidationFormatter."""

    def test_valid(self, ledger_request: dict) -> None:
        text = ValidationFormatter().format(validate_request(ledger_request))
        assert text == "Request is valid."

    def test_errors(self, ledger_request: dict) -> None:
        text = ValidationFormatter().format(
            validate_request({**ledger_request, "width_ft": -1})
        )
        assert "1 error(s)" in text
        assert "[out_of_range] width_ft" in text


class TestSpanTableFormatter:
    """Tests for SpanTableFormatter."""

    def test_lists_every_size(self, span_tables) -> None:
        text = SpanTableFormatter().format(span_tables, SpeciesGrade.SP_2)
        assert "JOIST SPANS - SP #2" in text
        for size in ("2x6", "2x8", "2x10", "2x12"):
            assert size in text
        assert "18'-0\"" in text
