"""Request validation endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from deckframe.application.validation import validate_request
from deckframe.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_structure_request(
    request: Annotated[dict[str, Any], Body()],
) -> ValidationResultSchema:
    """Validate a structure request without computing it.

    The body is taken as a plain object so that an invalid request is
    reported in the result rather than rejected.

    Args:
        request: Request record to validate.

    Returns:
        Validation result listing every error.
    """
    result = validate_request(request)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[error.to_dict() for error in result.errors],
    )
