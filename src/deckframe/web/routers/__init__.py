"""API routers for the REST API."""

from deckframe.web.routers.structure import router as structure_router
from deckframe.web.routers.validate import router as validate_router

__all__ = [
    "structure_router",
    "validate_router",
]
