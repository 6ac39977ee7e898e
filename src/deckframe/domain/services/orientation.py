"""Joist/beam orientation resolution."""

from __future__ import annotations

from dataclasses import dataclass

from deckframe.domain.value_objects import JoistOrientation


@dataclass(frozen=True)
class Orientation:
    """Which plan dimension the joists and beams span.

    Attributes:
        joist_span_ft: Short dimension, spanned by joists.
        beam_span_ft: Long dimension, spanned by beams.
        label: Plan axis the joists run along.
    """

    joist_span_ft: float
    beam_span_ft: float
    label: JoistOrientation


def resolve_orientation(width_ft: float, length_ft: float) -> Orientation:
    """Joists span the shorter dimension; a square deck spans its width."""
    if width_ft <= length_ft:
        return Orientation(
            joist_span_ft=width_ft,
            beam_span_ft=length_ft,
            label=JoistOrientation.SPANS_WIDTH,
        )
    return Orientation(
        joist_span_ft=length_ft,
        beam_span_ft=width_ft,
        label=JoistOrientation.SPANS_LENGTH,
    )
