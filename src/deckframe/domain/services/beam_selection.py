"""Beam size and post spacing selection, and beam style policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from deckframe.domain.entities import BeamSegment, BeamSpec
from deckframe.domain.errors import EngineError, EngineErrorCode
from deckframe.domain.value_objects import (
    Attachment,
    BeamPosition,
    BeamStyle,
    FootingType,
    SpeciesGrade,
)

from .hardware.calculator import POST_BASE_MODEL
from .pricing import PriceBook
from .span_tables import SpanTables, beam_table_key, required_posts

logger = logging.getLogger(__name__)

# (ply count, ply dimension) in the order candidates are tried.
BEAM_CANDIDATES: tuple[tuple[int, str], ...] = (
    (2, "2x8"),
    (3, "2x8"),
    (2, "2x10"),
    (3, "2x10"),
    (2, "2x12"),
    (3, "2x12"),
    (1, "2x10"),
    (1, "2x12"),
    (1, "2x8"),
)

# Joists at least this long put enough load on a beam to need two plies.
MIN_DOUBLE_PLY_JOIST_SPAN_FT = 10.0

# Below this height there is no room to drop a beam under the joists.
DROP_BEAM_MIN_HEIGHT_FT = 3.0


@dataclass(frozen=True)
class BeamOption:
    """One feasible beam candidate and what it costs."""

    ply_count: int
    dimension: str
    allowable_span_ft: float
    post_count: int
    post_spacing_ft: float
    cost: float

    @property
    def size(self) -> str:
        return f"({self.ply_count}){self.dimension}"


def resolve_beam_style(
    position: BeamPosition,
    attachment: Attachment,
    height_ft: float,
    footing: FootingType,
    requested: BeamStyle | None = None,
) -> BeamStyle:
    """Resolve a beam's style from the deck configuration.

    A ledger-attached deck always uses the ledger as its inner member.
    Otherwise an explicitly requested style is kept. Outer beams default to
    drop; a free-standing inner beam goes inline when the deck is low or on
    helical piles, and drops otherwise.
    """
    if position == BeamPosition.INNER and attachment == Attachment.LEDGER:
        return BeamStyle.LEDGER
    if requested is not None:
        return requested
    if position == BeamPosition.OUTER:
        return BeamStyle.DROP
    if height_ft < DROP_BEAM_MIN_HEIGHT_FT or footing == FootingType.HELICAL:
        return BeamStyle.INLINE
    return BeamStyle.DROP


def beam_options(
    beam_span_ft: float,
    joist_span_ft: float,
    species: SpeciesGrade,
    footing: FootingType,
    tables: SpanTables,
    prices: PriceBook,
) -> list[BeamOption]:
    """Every candidate that can span beam_span_ft, in candidate order."""
    key = beam_table_key(joist_span_ft)
    if key is None:
        raise EngineError(
            EngineErrorCode.SPAN_EXCEEDED,
            f"Joist span {joist_span_ft} ft is beyond the beam table",
        )
    min_ply = 2 if joist_span_ft >= MIN_DOUBLE_PLY_JOIST_SPAN_FT else 1
    per_post = prices.hardware_cost(POST_BASE_MODEL) + prices.footing_cost(footing)

    options: list[BeamOption] = []
    for ply_count, dimension in BEAM_CANDIDATES:
        if ply_count < min_ply:
            continue
        allowable = tables.allowable_beam_span(
            species, f"({ply_count}){dimension}", key
        )
        if allowable is None or allowable <= 0:
            continue
        post_count = required_posts(beam_span_ft, allowable)
        post_spacing = round(beam_span_ft / (post_count - 1), 4)
        if post_spacing > allowable + 1e-9:
            continue
        lumber = ply_count * beam_span_ft * prices.lumber_cost_per_foot(dimension, species)
        options.append(
            BeamOption(
                ply_count=ply_count,
                dimension=dimension,
                allowable_span_ft=allowable,
                post_count=post_count,
                post_spacing_ft=post_spacing,
                cost=round(lumber + post_count * per_post, 2),
            )
        )
    return options


def select_beam(
    beam_span_ft: float,
    joist_span_ft: float,
    species: SpeciesGrade,
    footing: FootingType,
    tables: SpanTables,
    prices: PriceBook,
    *,
    position: BeamPosition = BeamPosition.OUTER,
    style: BeamStyle = BeamStyle.DROP,
) -> BeamSpec:
    """Choose the cheapest beam and post layout for one beam line.

    Args:
        beam_span_ft: Beam length, the long plan dimension.
        joist_span_ft: Joist span bearing on the beam; keys the beam table.
        species: Lumber species and grade.
        footing: Footing type, priced into every post.
        tables: Span table provider.
        prices: Price snapshot.
        position: Outer or inner beam line.
        style: Resolved beam style.

    Returns:
        BeamSpec with one full-length, unspliced segment.

    Raises:
        EngineError: SPECIES_UNKNOWN or SPAN_EXCEEDED.
    """
    if not tables.has_beam_species(species):
        raise EngineError(
            EngineErrorCode.SPECIES_UNKNOWN,
            f"Species/grade {species.value!r} is not in the beam span table",
        )

    options = beam_options(beam_span_ft, joist_span_ft, species, footing, tables, prices)
    if not options:
        raise EngineError(
            EngineErrorCode.SPAN_EXCEEDED,
            f"No beam spans {beam_span_ft} ft with {joist_span_ft} ft joists "
            f"for {species.value}",
        )

    best = options[0]
    for option in options[1:]:
        if option.cost < best.cost - 1e-9:
            best = option

    logger.debug(
        f"{position.value} beam: {best.size} with {best.post_count} posts "
        f"@ {best.post_spacing_ft} ft (${best.cost:.2f}, {len(options)} options)"
    )
    return BeamSpec(
        position=position,
        style=style,
        span_ft=beam_span_ft,
        ply_count=best.ply_count,
        dimension=best.dimension,
        post_spacing_ft=best.post_spacing_ft,
        post_count=best.post_count,
        allowable_span_ft=best.allowable_span_ft,
        segments=(BeamSegment(start_ft=0.0, end_ft=beam_span_ft),),
    )
