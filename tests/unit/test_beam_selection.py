"""Unit tests for beam style policy and beam selection."""

import pytest

from deckframe.domain.errors import EngineError, EngineErrorCode
from deckframe.domain.services.beam_selection import (
    beam_options,
    resolve_beam_style,
    select_beam,
)
from deckframe.domain.services.pricing import PriceBook
from deckframe.domain.services.span_tables import SpanTables
from deckframe.domain.value_objects import (
    Attachment,
    BeamPosition,
    BeamStyle,
    FootingType,
    SpeciesGrade,
)


class TestResolveBeamStyle:
    """Tests for the beam style policy."""

    def test_ledger_deck_inner_is_ledger(self) -> None:
        style = resolve_beam_style(
            BeamPosition.INNER, Attachment.LEDGER, 6, FootingType.CONCRETE, BeamStyle.DROP
        )
        assert style == BeamStyle.LEDGER

    def test_outer_defaults_to_drop(self) -> None:
        style = resolve_beam_style(
            BeamPosition.OUTER, Attachment.LEDGER, 1, FootingType.HELICAL
        )
        assert style == BeamStyle.DROP

    def test_requested_style_wins(self) -> None:
        style = resolve_beam_style(
            BeamPosition.OUTER, Attachment.FREE, 6, FootingType.CONCRETE, BeamStyle.INLINE
        )
        assert style == BeamStyle.INLINE

    @pytest.mark.parametrize(
        ("height", "footing", "expected"),
        [
            (2.0, FootingType.CONCRETE, BeamStyle.INLINE),
            (5.0, FootingType.HELICAL, BeamStyle.INLINE),
            (5.0, FootingType.CONCRETE, BeamStyle.DROP),
            (3.0, FootingType.SURFACE, BeamStyle.DROP),
        ],
    )
    def test_free_standing_inner(
        self, height: float, footing: FootingType, expected: BeamStyle
    ) -> None:
        style = resolve_beam_style(BeamPosition.INNER, Attachment.FREE, height, footing)
        assert style == expected


class TestBeamOptions:
    """Tests for candidate beam enumeration."""

    def test_every_option_fits_table(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        options = beam_options(
            16, 12, SpeciesGrade.SPF_2, FootingType.CONCRETE, span_tables, prices
        )
        assert options
        for option in options:
            assert option.post_spacing_ft <= option.allowable_span_ft
            assert option.post_count >= 2

    def test_long_joists_need_two_plies(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        options = beam_options(
            16, 12, SpeciesGrade.SPF_2, FootingType.CONCRETE, span_tables, prices
        )
        assert all(option.ply_count >= 2 for option in options)

    def test_short_joists_allow_single_ply(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        options = beam_options(
            8, 6, SpeciesGrade.SPF_2, FootingType.CONCRETE, span_tables, prices
        )
        assert any(option.ply_count == 1 for option in options)

    def test_joist_span_beyond_table(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        with pytest.raises(EngineError) as exc_info:
            beam_options(
                16, 22, SpeciesGrade.SPF_2, FootingType.CONCRETE, span_tables, prices
            )
        assert exc_info.value.code == EngineErrorCode.SPAN_EXCEEDED


class TestSelectBeam:
    """Tests for the beam selector."""

    def test_cheapest_option(self, span_tables: SpanTables, prices: PriceBook) -> None:
        beam = select_beam(
            16, 12, SpeciesGrade.SPF_2, FootingType.CONCRETE, span_tables, prices
        )
        assert beam.size == "(2)2x10"
        assert beam.post_count == 3
        assert beam.post_spacing_ft == 8.0
        assert beam.position == BeamPosition.OUTER
        assert beam.style == BeamStyle.DROP

    def test_single_unspliced_segment(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        beam = select_beam(
            20, 16, SpeciesGrade.SPF_2, FootingType.HELICAL, span_tables, prices
        )
        assert len(beam.segments) == 1
        assert beam.segments[0].length_ft == 20
        assert not beam.spliced

    def test_expensive_footings_favor_fewer_posts(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        beam = select_beam(
            20, 16, SpeciesGrade.SPF_2, FootingType.HELICAL, span_tables, prices
        )
        assert beam.size == "(3)2x12"
        assert beam.post_count == 3

    def test_inner_position_and_style(
        self, span_tables: SpanTables, prices: PriceBook
    ) -> None:
        beam = select_beam(
            16,
            12,
            SpeciesGrade.SPF_2,
            FootingType.CONCRETE,
            span_tables,
            prices,
            position=BeamPosition.INNER,
            style=BeamStyle.INLINE,
        )
        assert beam.position == BeamPosition.INNER
        assert beam.style == BeamStyle.INLINE

    def test_species_unknown(self, prices: PriceBook) -> None:
        tables = SpanTables.model_validate(
            {
                "joists": {},
                "beams": {"SP #2": {"(2)2x10": {"12": 8.0}}},
                "decking": {},
            }
        )
        with pytest.raises(EngineError) as exc_info:
            select_beam(16, 12, SpeciesGrade.HF_2, FootingType.CONCRETE, tables, prices)
        assert exc_info.value.code == EngineErrorCode.SPECIES_UNKNOWN

    def test_no_beam_long_enough(self, prices: PriceBook) -> None:
        tables = SpanTables.model_validate(
            {
                "joists": {},
                "beams": {"SPF #2": {"(2)2x10": {"12": 0.0}}},
                "decking": {},
            }
        )
        with pytest.raises(EngineError) as exc_info:
            select_beam(16, 12, SpeciesGrade.SPF_2, FootingType.CONCRETE, tables, prices)
        assert exc_info.value.code == EngineErrorCode.SPAN_EXCEEDED
