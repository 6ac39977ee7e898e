"""Joist size, spacing and cantilever selection."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from deckframe.domain.entities import JoistSpec
from deckframe.domain.errors import EngineError, EngineErrorCode
from deckframe.domain.value_objects import (
    JOIST_SIZES,
    JOIST_SPACINGS,
    BeamStyle,
    DeckingType,
    FootingType,
    JoistOrientation,
    OptimizationGoal,
    SpeciesGrade,
)

from .cantilever import (
    MAX_CANTILEVER_RATIO,
    CantileverObjective,
    optimize_cantilever,
)
from .pricing import PriceBook
from .span_tables import SpanTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _JoistCandidate:
    size: str
    spacing_in: int
    cantilever_ft: float
    allowable_span_ft: float
    count: int
    score: float


def joist_count(long_dimension_ft: float, spacing_in: int) -> int:
    """Joists along the long dimension, both end joists included."""
    return math.ceil(long_dimension_ft * 12 / spacing_in - 1e-9) + 1


def candidate_spacings(
    tables: SpanTables,
    decking: DeckingType,
    forced_spacing_in: int | None = None,
) -> list[int]:
    """Spacings to try: the forced value alone, else those the decking allows."""
    if forced_spacing_in is not None:
        return [forced_spacing_in]
    max_spacing = tables.max_decking_spacing(decking)
    return [spacing for spacing in JOIST_SPACINGS if spacing <= max_spacing]


def smallest_joist_size(
    tables: SpanTables,
    species: SpeciesGrade,
    spacing_in: int,
    back_span_ft: float,
) -> tuple[str, float] | None:
    """Smallest size whose allowable span covers back_span_ft, with that span."""
    for size in JOIST_SIZES:
        allowable = tables.allowable_joist_span(species, size, spacing_in)
        if allowable is not None and allowable >= back_span_ft - 1e-9:
            return size, allowable
    return None


def longest_joist_span(
    tables: SpanTables, species: SpeciesGrade, spacing_in: int
) -> float | None:
    """Longest allowable span of any joist size at a spacing, if any."""
    spans = [tables.allowable_joist_span(species, size, spacing_in) for size in JOIST_SIZES]
    return max((span for span in spans if span is not None), default=None)


def _joist_objective(
    tables: SpanTables,
    prices: PriceBook,
    species: SpeciesGrade,
    spacing_in: int,
    count: int,
    goal: OptimizationGoal,
) -> CantileverObjective:
    """Score a (back-span, cantilever) pair at one spacing.

    Cost scores the lumber bill for the smallest adequate size; strength
    scores the negated reserve so that the optimizer's minimum is the
    strongest framing.
    """

    def objective(back_span: float, cantilever: float) -> float | None:
        found = smallest_joist_size(tables, species, spacing_in, back_span)
        if found is None:
            return None
        size, allowable = found
        if goal == OptimizationGoal.STRENGTH:
            return -(allowable / back_span)
        stock = prices.get_stock_length(back_span + cantilever, size)
        return count * stock * prices.lumber_cost_per_foot(size, species)

    return objective


def select_joist(
    short_span_ft: float,
    species: SpeciesGrade,
    decking: DeckingType,
    long_dimension_ft: float,
    tables: SpanTables,
    prices: PriceBook,
    *,
    forced_spacing_in: int | None = None,
    outer_beam_style: BeamStyle = BeamStyle.DROP,
    goal: OptimizationGoal = OptimizationGoal.COST,
    footing_type: FootingType | None = None,
    orientation: JoistOrientation = JoistOrientation.SPANS_WIDTH,
) -> JoistSpec:
    """Choose joist size, spacing and cantilever for a joist run.

    For each spacing the cantilever optimizer is run against the goal's
    objective; the best (size, spacing, cantilever) across spacings wins.

    Args:
        short_span_ft: Joist run, the short plan dimension.
        species: Lumber species and grade.
        decking: Decking product; limits the spacing options.
        long_dimension_ft: Deck dimension the joists are spread along.
        tables: Span table provider.
        prices: Price snapshot for the cost objective.
        forced_spacing_in: Use only this spacing when given.
        outer_beam_style: Inline outer beams carry no cantilever.
        goal: "cost" minimizes lumber cost, "strength" maximizes reserve.
        footing_type: Carried for the call context; joist framing does not
            depend on it.
        orientation: Plan axis label recorded on the result.

    Returns:
        The selected JoistSpec.

    Raises:
        EngineError: SPECIES_UNKNOWN when the species is missing from the
            joist table, SPAN_EXCEEDED when nothing spans the run.
    """
    if not tables.has_joist_species(species):
        raise EngineError(
            EngineErrorCode.SPECIES_UNKNOWN,
            f"Species/grade {species.value!r} is not in the joist span table",
        )

    max_ratio = 0.0 if outer_beam_style == BeamStyle.INLINE else MAX_CANTILEVER_RATIO
    spacings = candidate_spacings(tables, decking, forced_spacing_in)
    logger.debug(
        f"Joist search: run {short_span_ft} ft, spacings {spacings}, "
        f"goal {goal.value}, footing {footing_type.value if footing_type else None}"
    )

    best: _JoistCandidate | None = None
    for spacing in spacings:
        count = joist_count(long_dimension_ft, spacing)
        longest = longest_joist_span(tables, species, spacing)
        if longest is None:
            logger.debug(f"No joist spans listed at {spacing} in o.c.")
            continue
        objective = _joist_objective(tables, prices, species, spacing, count, goal)
        try:
            choice = optimize_cantilever(
                short_span_ft,
                objective,
                max_ratio=max_ratio,
                max_back_span_ft=longest,
            )
        except ValueError:
            logger.debug(f"No joist size spans {short_span_ft} ft at {spacing} in o.c.")
            continue

        size, allowable = smallest_joist_size(
            tables, species, spacing, choice.back_span_ft
        )
        candidate = _JoistCandidate(
            size=size,
            spacing_in=spacing,
            cantilever_ft=choice.cantilever_ft,
            allowable_span_ft=allowable,
            count=count,
            score=choice.score,
        )
        logger.debug(
            f"  {spacing} in o.c.: {size}, cantilever {choice.cantilever_ft} ft, "
            f"score {choice.score:.4f}"
        )
        if best is None or candidate.score < best.score - 1e-9:
            best = candidate

    if best is None:
        raise EngineError(
            EngineErrorCode.SPAN_EXCEEDED,
            f"No joist size and spacing spans {short_span_ft} ft "
            f"for {species.value} (spacings tried: {spacings})",
        )

    return JoistSpec(
        size=best.size,
        spacing_in=best.spacing_in,
        span_ft=short_span_ft,
        cantilever_ft=best.cantilever_ft,
        orientation=orientation,
        count=best.count,
        allowable_span_ft=best.allowable_span_ft,
    )
