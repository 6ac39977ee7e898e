"""Post placement under beams."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from deckframe.domain.entities import BeamSpec, PostSpec
from deckframe.domain.value_objects import BeamPosition, FootingType

logger = logging.getLogger(__name__)

# Height of the footing top above grade, taken off the post length.
FOOTING_STANDOFF_FT: dict[FootingType, float] = {
    FootingType.HELICAL: 0.5,
    FootingType.CONCRETE: 0.67,
    FootingType.SURFACE: 0.33,
}

MIN_POST_HEIGHT_FT = 1.0


def post_height(height_ft: float, footing: FootingType) -> float:
    """Post length for a deck height on a given footing."""
    return round(max(MIN_POST_HEIGHT_FT, height_ft - FOOTING_STANDOFF_FT[footing]), 2)


def generate_posts(
    beams: Iterable[BeamSpec],
    height_ft: float,
    footing: FootingType,
    deck_dimension_ft: float,
    cantilever_ft: float,
) -> list[PostSpec]:
    """Place posts at uniform spacing under every non-ledger beam.

    Args:
        beams: Beams of the frame; ledger entries are skipped.
        height_ft: Deck height above grade.
        footing: Footing type under each post.
        deck_dimension_ft: Deck dimension across the beams (the joist run).
        cantilever_ft: Joist overhang past the outer beam.

    Returns:
        Posts ordered by beam, then along the beam.
    """
    height = post_height(height_ft, footing)
    posts: list[PostSpec] = []
    for beam in beams:
        if beam.is_ledger:
            continue
        if beam.position == BeamPosition.OUTER:
            y = round(deck_dimension_ft - cantilever_ft, 4)
        else:
            y = 0.0
        for i in range(beam.post_count):
            posts.append(
                PostSpec(
                    x_ft=round(i * beam.post_spacing_ft, 4),
                    y_ft=y,
                    beam=beam.position,
                    height_ft=height,
                )
            )
    logger.debug(f"Generated {len(posts)} posts at {height} ft")
    return posts
