"""Structure engine: the single entry point from request to result.

validate -> orient -> joists -> beams -> posts -> takeoff -> compliance.
The engine holds only immutable reference data, so one instance can be
shared between callers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from deckframe.domain.entities import BeamSpec, FramePlan, StructureRequest
from deckframe.domain.errors import EngineError, EngineErrorCode
from deckframe.domain.services.beam_selection import resolve_beam_style, select_beam
from deckframe.domain.services.compliance import check_compliance
from deckframe.domain.services.joist_selection import select_joist
from deckframe.domain.services.orientation import resolve_orientation
from deckframe.domain.services.posts import generate_posts
from deckframe.domain.services.pricing import PriceBook, default_price_book
from deckframe.domain.services.span_tables import SpanTables, default_span_tables
from deckframe.domain.services.takeoff import MaterialTakeoff, generate_takeoff
from deckframe.domain.value_objects import BeamPosition, BeamStyle, OptimizationGoal

from .dtos import Metrics, StructureResult
from .validation import validate_request

logger = logging.getLogger(__name__)


class StructureEngine:
    """Computes deck structures against fixed span tables and prices.

    Args:
        span_tables: Allowable-span provider; built-in IRC tables by default.
        prices: Price snapshot; built-in prices by default.
    """

    def __init__(
        self,
        span_tables: SpanTables | None = None,
        prices: PriceBook | None = None,
    ) -> None:
        self.span_tables = span_tables or default_span_tables()
        self.prices = prices or default_price_book()

    def compute(self, request: StructureRequest | Mapping[str, Any]) -> StructureResult:
        """Design the structure for a request.

        Args:
            request: A typed StructureRequest, or a raw record with the
                wire field names.

        Returns:
            StructureResult with frame, takeoff, metrics and compliance.

        Raises:
            EngineError: INVALID_INPUT, SPECIES_UNKNOWN or SPAN_EXCEEDED.
                No partial result is ever returned.
        """
        typed = self._coerce(request)
        logger.info(
            f"Computing {typed.width_ft} x {typed.length_ft} ft deck at "
            f"{typed.height_ft} ft ({typed.attachment.value}, "
            f"{typed.footing_type.value}, {typed.species_grade.value}, "
            f"goal {typed.optimization_goal.value})"
        )

        frame = self.build_frame(typed)
        takeoff = self._takeoff(typed, frame)
        compliance = check_compliance(
            frame,
            typed.species_grade,
            typed.decking_type,
            self.span_tables,
            takeoff.hardware,
        )
        metrics = self._metrics(typed, frame, takeoff)

        logger.info(
            f"Selected {frame.joists.size} @ {frame.joists.spacing_in} in joists, "
            f"{len(frame.supported_beams)} beam(s), {len(frame.posts)} posts; "
            f"compliance {'passes' if compliance.passes else 'has warnings'}"
        )
        return StructureResult(
            request=typed,
            frame=frame,
            takeoff=takeoff,
            metrics=metrics,
            compliance=compliance,
        )

    def build_frame(self, request: StructureRequest) -> FramePlan:
        """Select joists, beams and posts for a validated request."""
        orientation = resolve_orientation(request.width_ft, request.length_ft)
        outer_style = resolve_beam_style(
            BeamPosition.OUTER,
            request.attachment,
            request.height_ft,
            request.footing_type,
            request.beam_style_outer,
        )
        inner_style = resolve_beam_style(
            BeamPosition.INNER,
            request.attachment,
            request.height_ft,
            request.footing_type,
            request.beam_style_inner,
        )

        joists = select_joist(
            orientation.joist_span_ft,
            request.species_grade,
            request.decking_type,
            orientation.beam_span_ft,
            self.span_tables,
            self.prices,
            forced_spacing_in=request.forced_joist_spacing_in,
            outer_beam_style=outer_style,
            goal=request.optimization_goal,
            footing_type=request.footing_type,
            orientation=orientation.label,
        )

        beams: list[BeamSpec] = []
        if inner_style == BeamStyle.LEDGER:
            beams.append(BeamSpec.ledger(orientation.beam_span_ft))
        for position, style in (
            (BeamPosition.INNER, inner_style),
            (BeamPosition.OUTER, outer_style),
        ):
            if style == BeamStyle.LEDGER:
                continue
            beams.append(
                select_beam(
                    orientation.beam_span_ft,
                    orientation.joist_span_ft,
                    request.species_grade,
                    request.footing_type,
                    self.span_tables,
                    self.prices,
                    position=position,
                    style=style,
                )
            )

        posts = generate_posts(
            beams,
            request.height_ft,
            request.footing_type,
            orientation.joist_span_ft,
            joists.cantilever_ft,
        )
        return FramePlan(joists=joists, beams=tuple(beams), posts=tuple(posts))

    def _coerce(self, request: StructureRequest | Mapping[str, Any]) -> StructureRequest:
        if isinstance(request, StructureRequest):
            return request
        result = validate_request(request)
        if not result.is_valid:
            raise EngineError(
                EngineErrorCode.INVALID_INPUT,
                "; ".join(result.messages),
                details=result.errors,
            )
        return result.request

    def _takeoff(self, request: StructureRequest, frame: FramePlan) -> MaterialTakeoff:
        return generate_takeoff(
            frame, request.species_grade, request.footing_type, self.prices
        )

    def _metrics(
        self, request: StructureRequest, frame: FramePlan, takeoff: MaterialTakeoff
    ) -> Metrics:
        goal = request.optimization_goal
        if goal == OptimizationGoal.STRENGTH:
            return Metrics(goal=goal, reserve_capacity_min=self.reserve_capacity(frame))
        return Metrics(
            goal=goal,
            total_board_ft=takeoff.total_board_feet,
            estimated_cost=takeoff.total_cost,
        )

    def reserve_capacity(self, frame: FramePlan) -> float:
        """Smallest allowable/actual span ratio over joists and beams."""
        joists = frame.joists
        ratios = [joists.allowable_span_ft / joists.back_span_ft]
        for beam in frame.supported_beams:
            if beam.allowable_span_ft and beam.post_spacing_ft:
                ratios.append(beam.allowable_span_ft / beam.post_spacing_ft)
        return round(min(ratios), 3)


def compute_structure(
    request: StructureRequest | Mapping[str, Any],
    span_tables: SpanTables | None = None,
    prices: PriceBook | None = None,
) -> StructureResult:
    """Run the engine once (see StructureEngine.compute)."""
    return StructureEngine(span_tables, prices).compute(request)
