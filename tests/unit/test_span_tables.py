"""Unit tests for the span tables and feet-inches helpers."""

import pytest

from deckframe.domain.services.span_tables import (
    BEAM_TABLE_JOIST_SPANS,
    SpanTables,
    beam_table_key,
    feet_inches,
    format_feet_inches,
    parse_feet_inches,
    required_posts,
)
from deckframe.domain.value_objects import DeckingType, SpeciesGrade


class TestFeetInches:
    """Tests for feet-inches conversion."""

    def test_parse(self) -> None:
        assert parse_feet_inches("7-9") == 7.75
        assert parse_feet_inches("11-0") == 11.0
        assert parse_feet_inches("13-7") == pytest.approx(13.5833, abs=1e-4)

    def test_parse_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_feet_inches("eleven")

    def test_feet_inches_rejects_twelve_inches(self) -> None:
        with pytest.raises(ValueError):
            feet_inches(5, 12)

    def test_format_rounds_to_nearest_inch(self) -> None:
        assert format_feet_inches(11.0833) == "11'-1\""
        assert format_feet_inches(2.5) == "2'-6\""


class TestBeamTableKey:
    """Tests for rounding joist spans onto the beam table ladder."""

    def test_exact_key(self) -> None:
        assert beam_table_key(12) == 12

    def test_rounds_up(self) -> None:
        assert beam_table_key(12.5) == 14
        assert beam_table_key(5.0) == 6

    def test_beyond_table(self) -> None:
        assert beam_table_key(20.5) is None

    def test_ladder_is_ascending(self) -> None:
        assert list(BEAM_TABLE_JOIST_SPANS) == sorted(BEAM_TABLE_JOIST_SPANS)


class TestRequiredPosts:
    """Tests for the post count needed under a beam."""

    def test_exact_multiple_does_not_add_a_post(self) -> None:
        assert required_posts(16.0, 8.0) == 3

    def test_partial_bay_adds_a_post(self) -> None:
        assert required_posts(16.0, 7.9) == 4

    def test_short_beam_needs_two(self) -> None:
        assert required_posts(6.0, 10.0) == 2


class TestDefaultSpanTables:
    """Tests for the built-in IRC tables."""

    def test_every_species_present(self, span_tables: SpanTables) -> None:
        for species in SpeciesGrade:
            assert span_tables.has_joist_species(species)
            assert span_tables.has_beam_species(species)

    def test_joist_lookup(self, span_tables: SpanTables) -> None:
        assert span_tables.allowable_joist_span(
            SpeciesGrade.SPF_2, "2x8", 16
        ) == pytest.approx(11.0833, abs=1e-4)
        assert span_tables.allowable_joist_span(SpeciesGrade.SP_2, "2x12", 12) == 18.0

    def test_missing_entry_is_none(self, span_tables: SpanTables) -> None:
        assert span_tables.allowable_joist_span(SpeciesGrade.SPF_2, "2x4", 16) is None
        assert span_tables.allowable_beam_span(SpeciesGrade.SPF_2, "(4)2x12", 12) is None

    def test_spans_shrink_with_spacing(self, span_tables: SpanTables) -> None:
        for size in ("2x6", "2x8", "2x10", "2x12"):
            row = span_tables.joists[SpeciesGrade.DF_1][size]
            assert row[12] >= row[16] >= row[24]

    def test_beam_spans_shrink_with_joist_span(self, span_tables: SpanTables) -> None:
        row = span_tables.beams[SpeciesGrade.HF_2]["(2)2x10"]
        values = [row[key] for key in BEAM_TABLE_JOIST_SPANS]
        assert values == sorted(values, reverse=True)

    def test_decking_limits(self, span_tables: SpanTables) -> None:
        assert span_tables.max_decking_spacing(DeckingType.COMPOSITE_1IN) == 16
        assert span_tables.max_decking_spacing(DeckingType.WOOD_2X) == 24
        assert span_tables.max_decking_spacing(DeckingType.WOOD_5_4, "diagonal") == 12

    def test_unknown_decking_orientation(self, span_tables: SpanTables) -> None:
        with pytest.raises(ValueError):
            span_tables.max_decking_spacing(DeckingType.WOOD_2X, "herringbone")

    def test_tables_are_frozen(self, span_tables: SpanTables) -> None:
        with pytest.raises(Exception):
            span_tables.joists = {}  # type: ignore


class TestCustomSpanTables:
    """Tests for loading tables from plain data."""

    def test_validates_from_json_shaped_data(self) -> None:
        tables = SpanTables.model_validate(
            {
                "joists": {"SPF #2": {"2x8": {"16": 11.0}}},
                "beams": {"SPF #2": {"(2)2x10": {"12": 8.0}}},
                "decking": {"composite_1in": {"perpendicular": 16, "diagonal": 12}},
            }
        )
        assert tables.allowable_joist_span(SpeciesGrade.SPF_2, "2x8", 16) == 11.0
        assert not tables.has_joist_species(SpeciesGrade.DF_1)
