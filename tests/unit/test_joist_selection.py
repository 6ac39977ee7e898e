"""Unit tests for joist selection."""

import pytest

from deckframe.domain.errors import EngineError, EngineErrorCode
from deckframe.domain.services.joist_selection import (
    candidate_spacings,
    joist_count,
    longest_joist_span,
    select_joist,
    smallest_joist_size,
)
from deckframe.domain.services.pricing import PriceBook
from deckframe.domain.services.span_tables import SpanTables
from deckframe.domain.value_objects import (
    BeamStyle,
    DeckingType,
    JoistOrientation,
    OptimizationGoal,
    SpeciesGrade,
)


class TestJoistCount:
    """Tests for the joist count along the long dimension."""

    def test_includes_both_ends(self) -> None:
        assert joist_count(16, 16) == 13
        assert joist_count(20, 16) == 16
        assert joist_count(16, 12) == 17

    def test_partial_bay_adds_joist(self) -> None:
        assert joist_count(10, 16) == 9


class TestCandidateSpacings:
    """Tests for spacing options."""

    def test_decking_limits_spacing(self, span_tables: SpanTables) -> None:
        assert candidate_spacings(span_tables, DeckingType.COMPOSITE_1IN) == [12, 16]
        assert candidate_spacings(span_tables, DeckingType.WOOD_2X) == [12, 16, 24]

    def test_forced_spacing(self, span_tables: SpanTables) -> None:
        assert candidate_spacings(span_tables, DeckingType.COMPOSITE_1IN, 24) == [24]


class TestSmallestJoistSize:
    """Tests for the smallest adequate joist size."""

    def test_picks_smallest(self, span_tables: SpanTables) -> None:
        size, allowable = smallest_joist_size(span_tables, SpeciesGrade.SPF_2, 16, 11.0)
        assert size == "2x8"
        assert allowable >= 11.0

    def test_none_when_too_long(self, span_tables: SpanTables) -> None:
        assert smallest_joist_size(span_tables, SpeciesGrade.SPF_2, 16, 16.0) is None


class TestLongestJoistSpan:
    """Tests for the longest listed span at a spacing."""

    def test_is_the_largest_size_span(self, span_tables: SpanTables) -> None:
        spans = [
            span_tables.allowable_joist_span(SpeciesGrade.SPF_2, size, 16)
            for size in ("2x6", "2x8", "2x10", "2x12")
        ]
        assert longest_joist_span(span_tables, SpeciesGrade.SPF_2, 16) == max(spans)


class TestSelectJoist:
    """Tests for the joist selector."""

    def test_cost_goal_uses_cantilever(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        joists = select_joist(
            12, SpeciesGrade.SPF_2, DeckingType.COMPOSITE_1IN, 16, span_tables, prices
        )
        assert joists.size == "2x8"
        assert joists.spacing_in == 16
        assert joists.cantilever_ft == 1.0
        assert joists.back_span_ft == 11.0
        assert joists.count == 13

    def test_result_is_always_within_table(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        for run in (6, 8.5, 10, 13, 15, 17.5):
            joists = select_joist(
                run, SpeciesGrade.DF_1, DeckingType.WOOD_2X, 20, span_tables, prices
            )
            assert joists.back_span_ft <= joists.allowable_span_ft + 1e-9
            assert joists.cantilever_ft <= joists.back_span_ft / 4 + 1e-9

    def test_inline_outer_beam_has_no_cantilever(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        joists = select_joist(
            12,
            SpeciesGrade.SPF_2,
            DeckingType.COMPOSITE_1IN,
            16,
            span_tables,
            prices,
            outer_beam_style=BeamStyle.INLINE,
        )
        assert joists.cantilever_ft == 0.0

    def test_forced_spacing_is_used(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        joists = select_joist(
            10,
            SpeciesGrade.SPF_2,
            DeckingType.WOOD_2X,
            12,
            span_tables,
            prices,
            forced_spacing_in=24,
        )
        assert joists.spacing_in == 24

    def test_strength_goal_maximizes_reserve(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        cost = select_joist(
            12, SpeciesGrade.SPF_2, DeckingType.COMPOSITE_1IN, 16, span_tables, prices
        )
        strength = select_joist(
            12,
            SpeciesGrade.SPF_2,
            DeckingType.COMPOSITE_1IN,
            16,
            span_tables,
            prices,
            goal=OptimizationGoal.STRENGTH,
        )
        assert (
            strength.allowable_span_ft / strength.back_span_ft
            >= cost.allowable_span_ft / cost.back_span_ft
        )

    def test_orientation_label_recorded(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        joists = select_joist(
            10,
            SpeciesGrade.SPF_2,
            DeckingType.COMPOSITE_1IN,
            20,
            span_tables,
            prices,
            orientation=JoistOrientation.SPANS_LENGTH,
        )
        assert joists.orientation == JoistOrientation.SPANS_LENGTH

    def test_span_exceeded(self, span_tables: SpanTables, prices: PriceBook) -> None:
        with pytest.raises(EngineError) as exc_info:
            select_joist(
                30, SpeciesGrade.SPF_2, DeckingType.COMPOSITE_1IN, 40, span_tables, prices
            )
        assert exc_info.value.code == EngineErrorCode.SPAN_EXCEEDED

    def test_very_long_run_fails_without_search(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        calls = 0
        original = span_tables.allowable_joist_span

        class CountingTables:
            def __getattr__(self, name: str):
                return getattr(span_tables, name)

            def allowable_joist_span(self, *args):
                nonlocal calls
                calls += 1
                return original(*args)

        with pytest.raises(EngineError) as exc_info:
            select_joist(
                1e9,
                SpeciesGrade.SPF_2,
                DeckingType.COMPOSITE_1IN,
                1e9,
                CountingTables(),
                prices,
            )
        assert exc_info.value.code == EngineErrorCode.SPAN_EXCEEDED
        assert calls < 50

    def test_species_unknown(self, prices: PriceBook) -> None:
        tables = SpanTables.model_validate(
            {
                "joists": {"SP #2": {"2x8": {"16": 12.0}}},
                "beams": {},
                "decking": {"composite_1in": {"perpendicular": 16, "diagonal": 12}},
            }
        )
        with pytest.raises(EngineError) as exc_info:
            select_joist(
                10, SpeciesGrade.SPF_2, DeckingType.COMPOSITE_1IN, 12, tables, prices
            )
        assert exc_info.value.code == EngineErrorCode.SPECIES_UNKNOWN
