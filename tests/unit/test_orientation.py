"""Unit tests for orientation resolution."""

from deckframe.domain.services.orientation import resolve_orientation
from deckframe.domain.value_objects import JoistOrientation


class TestResolveOrientation:
    """Joists always span the shorter plan dimension."""

    def test_narrow_deck_spans_width(self) -> None:
        orientation = resolve_orientation(12, 16)
        assert orientation.joist_span_ft == 12
        assert orientation.beam_span_ft == 16
        assert orientation.label == JoistOrientation.SPANS_WIDTH

    def test_wide_deck_spans_length(self) -> None:
        orientation = resolve_orientation(20, 10)
        assert orientation.joist_span_ft == 10
        assert orientation.beam_span_ft == 20
        assert orientation.label == JoistOrientation.SPANS_LENGTH

    def test_square_deck_spans_width(self) -> None:
        orientation = resolve_orientation(14, 14)
        assert orientation.label == JoistOrientation.SPANS_WIDTH
