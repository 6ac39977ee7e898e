"""Pytest configuration and shared fixtures for deck structure tests."""

from __future__ import annotations

from typing import Any

import pytest

from deckframe.application.engine import StructureEngine
from deckframe.domain.services.pricing import PriceBook, default_price_book
from deckframe.domain.services.span_tables import SpanTables, default_span_tables


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def span_tables() -> SpanTables:
    """Built-in IRC span tables."""
    return default_span_tables()


@pytest.fixture
def prices() -> PriceBook:
    """Built-in price book."""
    return default_price_book()


@pytest.fixture
def engine(span_tables: SpanTables, prices: PriceBook) -> StructureEngine:
    """Engine over the built-in tables and prices."""
    return StructureEngine(span_tables=span_tables, prices=prices)


@pytest.fixture
def ledger_request() -> dict[str, Any]:
    """12 x 16 ft ledger deck, 2 ft up on concrete footings."""
    return {
        "width_ft": 12,
        "length_ft": 16,
        "height_ft": 2,
        "attachment": "ledger",
        "footing_type": "concrete",
        "species_grade": "SPF #2",
        "decking_type": "composite_1in",
        "optimization_goal": "cost",
    }


@pytest.fixture
def freestanding_request() -> dict[str, Any]:
    """16 x 20 ft free-standing deck, 3 ft up on helical piles."""
    return {
        "width_ft": 16,
        "length_ft": 20,
        "height_ft": 3,
        "attachment": "free",
        "footing_type": "helical",
        "species_grade": "SPF #2",
        "decking_type": "composite_1in",
    }
