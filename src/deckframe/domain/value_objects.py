"""Value objects for the deck framing domain."""

from __future__ import annotations

from enum import Enum


class Attachment(str, Enum):
    """How the deck is supported on the house side.

    Attributes:
        LEDGER: Joists hang from a ledger bolted to the house.
        FREE: Free-standing; an inner beam on posts replaces the ledger.
    """

    LEDGER = "ledger"
    FREE = "free"


class BeamStyle(str, Enum):
    """How a beam relates to the joists it carries.

    Attributes:
        DROP: Joists bear on top of the beam.
        INLINE: Beam is flush with the joists, which hang from its face.
        LEDGER: Ledger board fastened to the house (inner position only).
    """

    DROP = "drop"
    INLINE = "inline"
    LEDGER = "ledger"


class BeamPosition(str, Enum):
    """Beam location across the joist run."""

    OUTER = "outer"
    INNER = "inner"


class FootingType(str, Enum):
    """Foundation method under each post."""

    HELICAL = "helical"
    CONCRETE = "concrete"
    SURFACE = "surface"


class SpeciesGrade(str, Enum):
    """Supported lumber species and grade combinations."""

    SPF_2 = "SPF #2"
    DF_1 = "DF #1"
    HF_2 = "HF #2"
    SP_2 = "SP #2"


class DeckingType(str, Enum):
    """Decking products, each with its own joist spacing limit."""

    COMPOSITE_1IN = "composite_1in"
    WOOD_5_4 = "wood_5/4"
    WOOD_2X = "wood_2x"


class OptimizationGoal(str, Enum):
    """Objective used when several code-compliant framings exist.

    Attributes:
        COST: Cheapest lumber.
        STRENGTH: Largest reserve span capacity.
    """

    COST = "cost"
    STRENGTH = "strength"


class JoistOrientation(str, Enum):
    """Which plan dimension the joists run along."""

    SPANS_WIDTH = "spans-width"
    SPANS_LENGTH = "spans-length"


class TakeoffCategory(str, Enum):
    """Top-level grouping of material takeoff lines."""

    LUMBER = "lumber"
    HARDWARE = "hardware"
    FOOTINGS = "footings"
    FASTENERS = "fasteners"


# Spacing options offered by the joist tables, in inches on center.
JOIST_SPACINGS: tuple[int, ...] = (12, 16, 24)

# Joist sizes in the order they are tried (smallest first).
JOIST_SIZES: tuple[str, ...] = ("2x6", "2x8", "2x10", "2x12")

# Nominal post size used for every post.
POST_SIZE = "6x6"
