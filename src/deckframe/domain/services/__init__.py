"""Deck framing domain services.

Selection, placement, takeoff and compliance logic. Every function takes
its reference data (span tables, price book) as arguments.
"""

from .beam_selection import resolve_beam_style, select_beam
from .cantilever import CantileverChoice, optimize_cantilever
from .compliance import ComplianceReport, check_compliance
from .hardware import (
    HardwareSchedule,
    calculate_hardware,
    validate_hardware_compliance,
)
from .joist_selection import select_joist
from .orientation import Orientation, resolve_orientation
from .posts import generate_posts, post_height
from .pricing import PriceBook, board_feet, default_price_book, get_stock_length
from .span_tables import SpanTables, beam_table_key, default_span_tables
from .takeoff import MaterialTakeoff, TakeoffItem, generate_takeoff

__all__ = [
    "CantileverChoice",
    "ComplianceReport",
    "HardwareSchedule",
    "MaterialTakeoff",
    "Orientation",
    "PriceBook",
    "SpanTables",
    "TakeoffItem",
    "beam_table_key",
    "board_feet",
    "calculate_hardware",
    "check_compliance",
    "default_price_book",
    "default_span_tables",
    "generate_posts",
    "generate_takeoff",
    "get_stock_length",
    "optimize_cantilever",
    "post_height",
    "resolve_beam_style",
    "resolve_orientation",
    "select_beam",
    "select_joist",
    "validate_hardware_compliance",
]
