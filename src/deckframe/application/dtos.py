"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from deckframe.domain.entities import FramePlan, StructureRequest
from deckframe.domain.services.compliance import ComplianceReport
from deckframe.domain.services.takeoff import MaterialTakeoff
from deckframe.domain.value_objects import OptimizationGoal


@dataclass(frozen=True)
class Metrics:
    """Goal-dependent summary numbers.

    Cost runs report board footage and estimated cost; strength runs
    report the smallest reserve ratio (allowable span / actual span) over
    the joists and every beam.
    """

    goal: OptimizationGoal
    total_board_ft: float | None = None
    estimated_cost: float | None = None
    reserve_capacity_min: float | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.goal == OptimizationGoal.STRENGTH:
            return {"reserve_capacity_min": self.reserve_capacity_min}
        return {
            "total_board_ft": self.total_board_ft,
            "estimated_cost": self.estimated_cost,
        }


@dataclass(frozen=True)
class StructureResult:
    """Complete output of one engine run."""

    request: StructureRequest
    frame: FramePlan
    takeoff: MaterialTakeoff
    metrics: Metrics
    compliance: ComplianceReport

    @property
    def optimization_goal(self) -> OptimizationGoal:
        return self.request.optimization_goal

    def to_dict(self) -> dict[str, Any]:
        """Output record using the wire field names."""
        return {
            "input": self.request.to_dict(),
            "optimization_goal": self.optimization_goal.value,
            "joists": self.frame.joists.to_dict(),
            "beams": [beam.to_dict() for beam in self.frame.beams],
            "posts": [post.to_dict() for post in self.frame.posts],
            "material_takeoff": [item.to_dict() for item in self.takeoff.items],
            "board_feet": dict(self.takeoff.board_feet),
            "hardware": self.takeoff.hardware.to_dict(),
            "metrics": self.metrics.to_dict(),
            "compliance": self.compliance.to_dict(),
        }


__all__ = ["ComplianceReport", "Metrics", "StructureResult"]
