"""Structure request schema.

The typed pydantic model for a deck structure request. Field types,
ranges and enum membership are checked here; the validation module turns
the resulting pydantic errors into request validation failures.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from deckframe.domain.value_objects import (
    Attachment,
    BeamStyle,
    DeckingType,
    FootingType,
    OptimizationGoal,
    SpeciesGrade,
)

# Surface footings may not carry a ledger-attached deck at or above this height.
SURFACE_LEDGER_MAX_HEIGHT_FT = 2.5

# Styles a caller may request; "ledger" is implied by attachment.
REQUESTABLE_BEAM_STYLES: tuple[BeamStyle, ...] = (BeamStyle.DROP, BeamStyle.INLINE)


class StructureRequestSchema(BaseModel):
    """Deck structure request.

    Numbers are strict: strings and booleans are rejected rather than
    coerced. A null field counts as not given.

    Attributes:
        width_ft: Plan width in feet.
        length_ft: Plan length in feet.
        height_ft: Deck height above grade in feet.
        attachment: Ledger-attached or free-standing.
        beam_style_outer: Requested outer beam style.
        beam_style_inner: Requested inner beam style.
        footing_type: Foundation under every post.
        species_grade: Lumber species and grade.
        forced_joist_spacing_in: Joist spacing to force, in inches.
        decking_type: Decking product.
        optimization_goal: cost (default) or strength.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "width_ft": 12,
                "length_ft": 16,
                "height_ft": 2,
                "attachment": "ledger",
                "footing_type": "concrete",
                "species_grade": "SPF #2",
                "decking_type": "composite_1in",
                "optimization_goal": "cost",
            }
        }
    )

    width_ft: float = Field(
        gt=0, strict=True, allow_inf_nan=False, description="Deck width in feet"
    )
    length_ft: float = Field(
        gt=0, strict=True, allow_inf_nan=False, description="Deck length in feet"
    )
    height_ft: float = Field(
        ge=0, strict=True, allow_inf_nan=False, description="Deck height in feet"
    )
    attachment: Attachment = Field(description="ledger or free")
    beam_style_outer: BeamStyle | None = Field(default=None, description="drop or inline")
    beam_style_inner: BeamStyle | None = Field(default=None, description="drop or inline")
    footing_type: FootingType = Field(description="helical, concrete or surface")
    species_grade: SpeciesGrade = Field(description="SPF #2, DF #1, HF #2 or SP #2")
    forced_joist_spacing_in: Literal[12, 16, 24] | None = Field(
        default=None, description="Joist spacing to force: 12, 16 or 24"
    )
    decking_type: DeckingType = Field(description="composite_1in, wood_5/4 or wood_2x")
    optimization_goal: OptimizationGoal = Field(
        default=OptimizationGoal.COST, description="cost or strength"
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat explicit nulls as absent fields."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("beam_style_outer", "beam_style_inner")
    @classmethod
    def requestable_beam_style(cls, v: BeamStyle | None) -> BeamStyle | None:
        """Ledger is implied by attachment and cannot be requested."""
        if v is not None and v not in REQUESTABLE_BEAM_STYLES:
            raise PydanticCustomError("enum", "Input should be 'drop' or 'inline'")
        return v

    @field_validator("forced_joist_spacing_in", mode="before")
    @classmethod
    def whole_inches(cls, v: Any) -> Any:
        """Accept 16.0 as 16; reject fractions, strings and booleans."""
        if v is None:
            return v
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise PydanticCustomError("int_type", "Input should be a whole number of inches")
        if isinstance(v, float):
            if not v.is_integer():
                raise PydanticCustomError(
                    "int_from_float", "Input should be a whole number of inches"
                )
            return int(v)
        return v

    @model_validator(mode="after")
    def surface_footing_height(self) -> "StructureRequestSchema":
        """Surface footings cannot carry a tall ledger-attached deck."""
        if (
            self.footing_type == FootingType.SURFACE
            and self.attachment == Attachment.LEDGER
            and self.height_ft >= SURFACE_LEDGER_MAX_HEIGHT_FT
        ):
            raise PydanticCustomError(
                "illegal_combination",
                "surface footings cannot support a ledger-attached deck at "
                "{limit} ft or higher",
                {
                    "limit": SURFACE_LEDGER_MAX_HEIGHT_FT,
                    "field": "footing_type",
                    "values": {
                        "footing_type": self.footing_type.value,
                        "height_ft": self.height_ft,
                        "attachment": self.attachment.value,
                    },
                },
            )
        return self

    def to_record(self) -> dict[str, Any]:
        """Request record with unset fields left out."""
        return self.model_dump(exclude_none=True)
