"""Pydantic schemas for the REST API."""

from deckframe.web.schemas.requests import StructureRequestSchema
from deckframe.web.schemas.responses import (
    BeamSchema,
    BeamSegmentSchema,
    ComplianceSchema,
    ErrorResponseSchema,
    JoistSchema,
    PostSchema,
    StructureResponseSchema,
    TakeoffItemSchema,
    ValidationErrorSchema,
    ValidationResultSchema,
)

__all__ = [
    "BeamSchema",
    "BeamSegmentSchema",
    "ComplianceSchema",
    "ErrorResponseSchema",
    "JoistSchema",
    "PostSchema",
    "StructureRequestSchema",
    "StructureResponseSchema",
    "TakeoffItemSchema",
    "ValidationErrorSchema",
    "ValidationResultSchema",
]
