"""Structure computation endpoints."""

from fastapi import APIRouter

from deckframe.web.dependencies import EngineDep
from deckframe.web.schemas.requests import StructureRequestSchema
from deckframe.web.schemas.responses import ErrorResponseSchema, StructureResponseSchema

router = APIRouter(prefix="/structure", tags=["structure"])


@router.post(
    "",
    response_model=StructureResponseSchema,
    responses={
        409: {"model": ErrorResponseSchema, "description": "Deck cannot be framed"},
        422: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)
def compute_structure(
    request: StructureRequestSchema,
    engine: EngineDep,
) -> StructureResponseSchema:
    """Select joists, beams and posts and list materials for a deck.

    Args:
        request: Deck geometry and configuration.
        engine: Shared structure engine.

    Returns:
        The complete structure record.
    """
    result = engine.compute(request.to_record())
    return StructureResponseSchema.model_validate(result.to_dict())
