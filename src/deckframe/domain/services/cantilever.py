"""Cantilever length optimizer.

Joists may run past the outer beam. A longer cantilever shortens the
back-span (allowing smaller joists) but the code limits it to a quarter of
the back-span. The optimizer walks discrete cantilever lengths and asks a
caller-supplied objective to score each one.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MAX_CANTILEVER_RATIO = 0.25
CANTILEVER_STEP_FT = 0.5

# (back_span_ft, cantilever_ft) -> score, lower is better; None when infeasible.
CantileverObjective = Callable[[float, float], float | None]


@dataclass(frozen=True)
class CantileverChoice:
    """Winning cantilever and the score the objective gave it."""

    cantilever_ft: float
    back_span_ft: float
    score: float


def max_cantilever(run_ft: float, max_ratio: float = MAX_CANTILEVER_RATIO) -> float:
    """Largest cantilever c with c <= max_ratio * (run_ft - c)."""
    if run_ft <= 0:
        raise ValueError("Joist run must be positive")
    if max_ratio < 0:
        raise ValueError("Cantilever ratio must be non-negative")
    return max_ratio * run_ft / (1 + max_ratio)


def candidate_cantilevers(
    run_ft: float,
    max_ratio: float = MAX_CANTILEVER_RATIO,
    step_ft: float = CANTILEVER_STEP_FT,
    max_back_span_ft: float | None = None,
) -> list[float]:
    """Cantilever lengths to try, shortest first.

    With max_back_span_ft, cantilevers that leave a longer back-span are
    skipped, so the list never grows past max_back_span_ft / step_ft + 1
    entries however long the run is.
    """
    if step_ft <= 0:
        raise ValueError("Cantilever step must be positive")
    limit = max_cantilever(run_ft, max_ratio)
    candidates: list[float] = []
    k = 0
    if max_back_span_ft is not None:
        shortest = run_ft - max_back_span_ft
        if shortest > limit + 1e-9:
            return candidates
        k = max(0, math.ceil(shortest / step_ft - 1e-9))
    while k * step_ft <= limit + 1e-9:
        candidates.append(round(k * step_ft, 4))
        k += 1
    return candidates


def optimize_cantilever(
    run_ft: float,
    objective: CantileverObjective,
    *,
    max_ratio: float = MAX_CANTILEVER_RATIO,
    step_ft: float = CANTILEVER_STEP_FT,
    max_back_span_ft: float | None = None,
) -> CantileverChoice:
    """Pick the cantilever the objective scores lowest.

    Args:
        run_ft: Full joist run (back-span plus cantilever).
        objective: Scores a (back_span, cantilever) pair; None rejects it.
        max_ratio: Maximum cantilever as a fraction of back-span.
        step_ft: Granularity of the search.
        max_back_span_ft: Longest back-span the objective can accept; longer
            ones are not offered to it.

    Returns:
        CantileverChoice for the best candidate. Ties keep the shorter
        cantilever.

    Raises:
        ValueError: If the objective rejects every candidate.
    """
    best: CantileverChoice | None = None
    for cantilever in candidate_cantilevers(run_ft, max_ratio, step_ft, max_back_span_ft):
        back_span = round(run_ft - cantilever, 4)
        score = objective(back_span, cantilever)
        if score is None:
            continue
        if best is None or score < best.score - 1e-9:
            best = CantileverChoice(
                cantilever_ft=cantilever, back_span_ft=back_span, score=score
            )

    if best is None:
        raise ValueError(f"No feasible cantilever for a {run_ft} ft joist run")

    logger.debug(
        f"Cantilever for {run_ft} ft run: {best.cantilever_ft} ft "
        f"(back-span {best.back_span_ft} ft, score {best.score:.4f})"
    )
    return best
