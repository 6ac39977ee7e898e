"""FastAPI dependency injection for the structure engine."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from deckframe.application.engine import StructureEngine


@lru_cache(maxsize=1)
def get_engine() -> StructureEngine:
    """Shared engine over the built-in span tables and prices."""
    return StructureEngine()


EngineDep = Annotated[StructureEngine, Depends(get_engine)]
