"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class JoistSchema(BaseModel):
    """Selected joists."""

    size: str = Field(..., description="Nominal size, e.g. 2x8")
    spacing_in: int = Field(..., description="On-center spacing in inches")
    span_ft: float = Field(..., description="Joist run in feet")
    back_span_ft: float = Field(..., description="Supported span in feet")
    cantilever_ft: float = Field(..., description="Overhang past the outer beam")
    orientation: str = Field(..., description="spans-width or spans-length")
    count: int = Field(..., description="Number of joists")
    total_length_ft: float = Field(..., description="Member length in feet")


class BeamSegmentSchema(BaseModel):
    """Continuous beam segment."""

    start_ft: float
    end_ft: float
    length_ft: float
    splice: bool = False


class BeamSchema(BaseModel):
    """A beam or the ledger."""

    position: str = Field(..., description="outer or inner")
    style: str = Field(..., description="drop, inline or ledger")
    size: str | None = Field(default=None, description="e.g. (2)2x10; null for ledger")
    span_ft: float
    post_spacing_ft: float | None = None
    post_count: int = 0
    dimension: str | None = None
    ply_count: int | None = None
    segments: list[BeamSegmentSchema] = Field(default_factory=list)
    spliced: bool = False


class PostSchema(BaseModel):
    """A post position."""

    x: float = Field(..., description="Along-beam coordinate in feet")
    y: float = Field(..., description="Across-deck coordinate in feet")
    beam: str = Field(..., description="Beam the post supports")
    height_ft: float
    size: str


class TakeoffItemSchema(BaseModel):
    """Material takeoff line."""

    description: str
    quantity: int
    unit: str
    unit_cost: float
    extended_cost: float
    category: str
    subcategory: str
    size: str | None = None
    length_ft: float | None = None
    board_feet: float = 0.0


class ComplianceSchema(BaseModel):
    """Compliance report."""

    passes: bool
    joist_table: str
    beam_table: str
    assumptions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class StructureResponseSchema(BaseModel):
    """Response for a structure computation."""

    input: dict[str, Any] = Field(..., description="Resolved request")
    optimization_goal: str
    joists: JoistSchema
    beams: list[BeamSchema]
    posts: list[PostSchema]
    material_takeoff: list[TakeoffItemSchema]
    board_feet: dict[str, float] = Field(default_factory=dict)
    hardware: dict[str, Any] = Field(default_factory=dict)
    metrics: dict[str, float | None]
    compliance: ComplianceSchema


class ValidationErrorSchema(BaseModel):
    """A single request validation failure."""

    code: str
    field: str
    message: str
    value: Any = None


class ValidationResultSchema(BaseModel):
    """Response for request validation."""

    is_valid: bool = Field(..., description="Whether the request is valid")
    errors: list[ValidationErrorSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: list[dict[str, Any]] | None = None
