"""Allowable-span reference tables for deck joists, beams and decking.

This module provides:
- SpanTables: read-only provider of joist, beam and decking limits
- Built-in IRC-2021 defaults (Tables R507.6, R507.5 and R507.7)
- Helpers for the feet-inches notation used by the code tables

Tables are passed into every engine call; nothing here is mutated after
construction.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from deckframe.domain.value_objects import DeckingType, SpeciesGrade

# Joist spans used as row keys in the beam table, in feet.
BEAM_TABLE_JOIST_SPANS: tuple[int, ...] = (6, 7, 8, 9, 10, 11, 12, 14, 16, 18, 20)

JOIST_TABLE_CITATION = "IRC-2021 R507.6"
BEAM_TABLE_CITATION = "IRC-2021 R507.5"

_FEET_INCHES = re.compile(r"^\s*(\d+)\s*-\s*(\d{1,2})\s*$")


def feet_inches(feet: int, inches: int = 0) -> float:
    """Convert a feet-inches pair to decimal feet.

    Args:
        feet: Whole feet.
        inches: Additional inches (0-11).

    Returns:
        Decimal feet rounded to four places.
    """
    if inches < 0 or inches >= 12:
        raise ValueError(f"inches must be between 0 and 11, got {inches}")
    return round(feet + inches / 12, 4)


def parse_feet_inches(value: str) -> float:
    """Parse code-table notation such as "11-9" into decimal feet.

    Examples:
        >>> parse_feet_inches("7-9")
        7.75
    """
    match = _FEET_INCHES.match(value)
    if not match:
        raise ValueError(f"Not a feet-inches value: {value!r}")
    return feet_inches(int(match.group(1)), int(match.group(2)))


def format_feet_inches(value_ft: float) -> str:
    """Format decimal feet as feet-inches, rounding to the nearest inch."""
    total_inches = round(value_ft * 12)
    return f"{total_inches // 12}'-{total_inches % 12}\""


def beam_table_key(joist_span_ft: float) -> int | None:
    """Round a joist span up onto the beam table ladder.

    Returns:
        The smallest ladder value >= joist_span_ft, or None above 20 ft.
    """
    for key in BEAM_TABLE_JOIST_SPANS:
        if key >= joist_span_ft - 1e-9:
            return key
    return None


class DeckingLimit(BaseModel):
    """Maximum joist spacing for a decking product, in inches."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    perpendicular: int = Field(..., gt=0)
    diagonal: int = Field(..., gt=0)


class SpanTables(BaseModel):
    """Read-only allowable-span provider.

    Attributes:
        joists: species -> joist size -> spacing (in) -> allowable span (ft).
        beams: species -> "(N)2xM" -> joist-span key (ft) -> allowable span (ft).
        decking: decking type -> maximum joist spacing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    joists: dict[SpeciesGrade, dict[str, dict[int, float]]]
    beams: dict[SpeciesGrade, dict[str, dict[int, float]]]
    decking: dict[DeckingType, DeckingLimit]

    def has_joist_species(self, species: SpeciesGrade) -> bool:
        return species in self.joists

    def has_beam_species(self, species: SpeciesGrade) -> bool:
        return species in self.beams

    def allowable_joist_span(
        self, species: SpeciesGrade, size: str, spacing_in: int
    ) -> float | None:
        """Allowable joist span in feet, or None when the table has no entry."""
        return self.joists.get(species, {}).get(size, {}).get(spacing_in)

    def allowable_beam_span(
        self, species: SpeciesGrade, ply_dimension: str, joist_span_key: int
    ) -> float | None:
        """Allowable beam span in feet for a rounded joist-span key."""
        return self.beams.get(species, {}).get(ply_dimension, {}).get(joist_span_key)

    def max_decking_spacing(
        self, decking: DeckingType, orientation: str = "perpendicular"
    ) -> int:
        """Largest joist spacing the decking can bridge, in inches."""
        limit = self.decking[decking]
        if orientation == "diagonal":
            return limit.diagonal
        if orientation != "perpendicular":
            raise ValueError(f"Unknown decking orientation: {orientation}")
        return limit.perpendicular


# --- Built-in tables ------------------------------------------------------

# IRC-2021 Table R507.6, no cantilever; spacing 12/16/24 in.
_JOISTS_SOUTHERN_PINE: dict[str, tuple[str, str, str]] = {
    "2x6": ("9-11", "9-0", "7-7"),
    "2x8": ("13-1", "11-10", "9-8"),
    "2x10": ("16-2", "14-0", "11-5"),
    "2x12": ("18-0", "16-6", "13-6"),
}

# Douglas fir-larch, hem-fir, spruce-pine-fir column.
_JOISTS_DFL_HF_SPF: dict[str, tuple[str, str, str]] = {
    "2x6": ("9-6", "8-4", "6-10"),
    "2x8": ("12-6", "11-1", "9-1"),
    "2x10": ("15-8", "13-7", "11-1"),
    "2x12": ("18-0", "15-9", "12-10"),
}

# IRC-2021 Table R507.5 style rows, one value per BEAM_TABLE_JOIST_SPANS key.
_BEAMS_SOUTHERN_PINE: dict[str, tuple[str, ...]] = {
    "(1)2x8": ("7-6", "6-11", "6-6", "6-1", "5-9", "5-6", "5-4", "4-10", "4-7", "4-4", "4-2"),
    "(2)2x8": ("9-8", "8-11", "8-4", "7-11", "7-6", "7-1", "6-10", "6-4", "5-11", "5-7", "5-4"),
    "(3)2x8": ("11-3", "10-4", "9-9", "9-2", "8-9", "8-3", "7-11", "7-5", "6-10", "6-6", "6-1"),
    "(1)2x10": ("9-5", "8-9", "8-2", "7-9", "7-3", "7-0", "6-8", "6-3", "5-9", "5-6", "5-3"),
    "(2)2x10": ("12-6", "11-6", "10-10", "10-2", "9-8", "9-2", "8-10", "8-2", "7-8", "7-2", "6-10"),
    "(3)2x10": ("14-8", "13-7", "12-8", "12-0", "11-4", "10-10", "10-4", "9-8", "9-0", "8-6", "8-0"),
    "(1)2x12": ("11-5", "10-7", "9-11", "9-4", "8-10", "8-6", "8-1", "7-6", "7-0", "6-7", "6-4"),
    "(2)2x12": ("15-3", "14-0", "13-2", "12-5", "11-9", "11-3", "10-9", "9-11", "9-3", "8-9", "8-3"),
    "(3)2x12": ("18-0", "16-8", "15-7", "14-8", "13-11", "13-4", "12-8", "11-9", "11-0", "10-4", "9-10"),
}

_BEAMS_DFL_HF_SPF: dict[str, tuple[str, ...]] = {
    "(1)2x8": ("6-11", "6-5", "6-0", "5-8", "5-4", "5-1", "4-11", "4-6", "4-3", "4-0", "3-10"),
    "(2)2x8": ("8-11", "8-3", "7-9", "7-4", "6-11", "6-7", "6-4", "5-10", "5-6", "5-2", "4-11"),
    "(3)2x8": ("10-5", "9-7", "9-0", "8-6", "8-1", "7-8", "7-4", "6-10", "6-4", "6-0", "5-8"),
    "(1)2x10": ("8-9", "8-1", "7-7", "7-2", "6-9", "6-6", "6-2", "5-9", "5-4", "5-1", "4-10"),
    "(2)2x10": ("11-7", "10-8", "10-0", "9-5", "8-11", "8-6", "8-2", "7-7", "7-1", "6-8", "6-4"),
    "(3)2x10": ("13-7", "12-7", "11-9", "11-1", "10-6", "10-0", "9-7", "8-11", "8-4", "7-10", "7-5"),
    "(1)2x12": ("10-7", "9-10", "9-2", "8-8", "8-2", "7-10", "7-6", "6-11", "6-6", "6-1", "5-10"),
    "(2)2x12": ("14-1", "13-0", "12-2", "11-6", "10-11", "10-5", "9-11", "9-2", "8-7", "8-1", "7-8"),
    "(3)2x12": ("16-8", "15-5", "14-5", "13-7", "12-11", "12-4", "11-9", "10-11", "10-2", "9-7", "9-1"),
}

# IRC-2021 Table R507.7; composite follows typical manufacturer limits.
_DECKING_LIMITS: dict[DeckingType, tuple[int, int]] = {
    DeckingType.COMPOSITE_1IN: (16, 12),
    DeckingType.WOOD_5_4: (16, 12),
    DeckingType.WOOD_2X: (24, 16),
}

# Species grouped the way the code tables group them.
_SPECIES_GROUPS: dict[SpeciesGrade, str] = {
    SpeciesGrade.SP_2: "southern_pine",
    SpeciesGrade.DF_1: "dfl_hf_spf",
    SpeciesGrade.HF_2: "dfl_hf_spf",
    SpeciesGrade.SPF_2: "dfl_hf_spf",
}


def _joist_rows(rows: dict[str, tuple[str, str, str]]) -> dict[str, dict[int, float]]:
    return {
        size: {
            spacing: parse_feet_inches(value)
            for spacing, value in zip((12, 16, 24), values)
        }
        for size, values in rows.items()
    }


def _beam_rows(rows: dict[str, tuple[str, ...]]) -> dict[str, dict[int, float]]:
    return {
        size: {
            key: parse_feet_inches(value)
            for key, value in zip(BEAM_TABLE_JOIST_SPANS, values, strict=True)
        }
        for size, values in rows.items()
    }


@lru_cache(maxsize=1)
def default_span_tables() -> SpanTables:
    """Build the built-in IRC-2021 span tables (cached, immutable)."""
    joist_groups = {
        "southern_pine": _joist_rows(_JOISTS_SOUTHERN_PINE),
        "dfl_hf_spf": _joist_rows(_JOISTS_DFL_HF_SPF),
    }
    beam_groups = {
        "southern_pine": _beam_rows(_BEAMS_SOUTHERN_PINE),
        "dfl_hf_spf": _beam_rows(_BEAMS_DFL_HF_SPF),
    }
    return SpanTables(
        joists={species: joist_groups[group] for species, group in _SPECIES_GROUPS.items()},
        beams={species: beam_groups[group] for species, group in _SPECIES_GROUPS.items()},
        decking={
            decking: DeckingLimit(perpendicular=perp, diagonal=diag)
            for decking, (perp, diag) in _DECKING_LIMITS.items()
        },
    )


def required_posts(beam_span_ft: float, allowable_span_ft: float) -> int:
    """Minimum posts so that no bay exceeds the allowable span."""
    return math.ceil(beam_span_ft / allowable_span_ft - 1e-9) + 1
