"""Domain layer - deck framing entities, value objects and services."""

from .entities import (
    BeamSegment,
    BeamSpec,
    FramePlan,
    JoistSpec,
    PostSpec,
    StructureRequest,
)
from .errors import EngineError, EngineErrorCode, ValidationError, ValidationErrorCode
from .value_objects import (
    Attachment,
    BeamPosition,
    BeamStyle,
    DeckingType,
    FootingType,
    JoistOrientation,
    OptimizationGoal,
    SpeciesGrade,
    TakeoffCategory,
)

__all__ = [
    "Attachment",
    "BeamPosition",
    "BeamSegment",
    "BeamSpec",
    "BeamStyle",
    "DeckingType",
    "EngineError",
    "EngineErrorCode",
    "FootingType",
    "FramePlan",
    "JoistOrientation",
    "JoistSpec",
    "OptimizationGoal",
    "PostSpec",
    "SpeciesGrade",
    "StructureRequest",
    "TakeoffCategory",
    "ValidationError",
    "ValidationErrorCode",
]
