"""FastAPI REST API for deck structure design.

This module exposes the structure engine and request validation over HTTP.

Usage:
    uvicorn deckframe.web:app --reload
"""

from deckframe.web.app import app, create_app

__all__ = ["app", "create_app"]
