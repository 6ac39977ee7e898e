"""Pydantic request schemas for the REST API."""

from deckframe.application.config.schemas import StructureRequestSchema

__all__ = ["StructureRequestSchema"]
