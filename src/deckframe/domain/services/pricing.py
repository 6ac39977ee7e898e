"""Price book and stock-length lookups.

This module provides:
- PriceBook: immutable snapshot of lumber, hardware, fastener and footing prices
- get_stock_length: round a required length up to a purchasable stock length
- board_feet: nominal board-foot volume of a piece of lumber

A price book is passed explicitly to every selector and to the takeoff
generator; there is no module-level mutable price store.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from deckframe.domain.value_objects import FootingType, SpeciesGrade

logger = logging.getLogger(__name__)


class LumberPrice(BaseModel):
    """Per-foot cost of a nominal lumber size."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cost_per_foot: float = Field(..., ge=0)


class HardwarePrice(BaseModel):
    """Catalogue entry for a connector.

    Attributes:
        description: Display name used on takeoff lines.
        cost: Unit cost in dollars.
        nails_required: Hanger nails per installed unit.
        screws_required: Structural screws per installed unit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str
    cost: float = Field(..., ge=0)
    nails_required: int = Field(default=0, ge=0)
    screws_required: int = Field(default=0, ge=0)


class FastenerPack(BaseModel):
    """Fasteners sold by the box or pack."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str
    pack_size: int = Field(..., gt=0)
    pack_cost: float = Field(..., ge=0)

    def packs_for(self, quantity: int) -> int:
        """Packs needed to cover quantity fasteners (never rounds down)."""
        if quantity <= 0:
            return 0
        return math.ceil(quantity / self.pack_size)


class PriceBook(BaseModel):
    """Immutable price snapshot for one engine call.

    Keys are stable strings: lumber sizes ("2x8", "6x6"), hardware models
    ("LUS28", "BC6") and fastener kinds ("hanger_nails", "sds_screws",
    "ledger_lags").
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lumber: dict[str, LumberPrice]
    stock_lengths: dict[str, tuple[int, ...]]
    species_multipliers: dict[SpeciesGrade, float]
    hardware: dict[str, HardwarePrice]
    fasteners: dict[str, FastenerPack]
    footings: dict[FootingType, float]

    def lumber_cost_per_foot(
        self, size: str, species: SpeciesGrade | None = None
    ) -> float:
        """Per-foot cost of a lumber size, adjusted for species when given."""
        base = self.lumber[size].cost_per_foot
        if species is None:
            return base
        return round(base * self.species_multipliers.get(species, 1.0), 4)

    def hardware_item(self, model: str) -> HardwarePrice:
        return self.hardware[model]

    def hardware_cost(self, model: str) -> float:
        return self.hardware[model].cost

    def footing_cost(self, footing: FootingType) -> float:
        return self.footings[footing]

    def fastener(self, kind: str) -> FastenerPack:
        return self.fasteners[kind]

    def get_stock_length(self, length_ft: float, size: str) -> int:
        return get_stock_length(length_ft, size, self)

    def board_feet(self, size: str, length_ft: float) -> float:
        return board_feet(size, length_ft, self)


def get_stock_length(length_ft: float, size: str, prices: PriceBook) -> int:
    """Smallest purchasable length that is at least length_ft.

    Lengths past the end of the catalogue are special orders and round up
    to the next even foot.

    Args:
        length_ft: Required member length in feet.
        size: Nominal lumber size, e.g. "2x10".
        prices: Price book holding the stock length catalogue.

    Returns:
        Stock length in whole feet, never shorter than length_ft.
    """
    if length_ft <= 0:
        raise ValueError(f"Stock length requested for non-positive length {length_ft}")
    lengths = sorted(prices.stock_lengths[size])
    for stock in lengths:
        if stock >= length_ft - 1e-9:
            return stock
    special = math.ceil(length_ft - 1e-9)
    if special % 2:
        special += 1
    logger.warning(
        f"{size} at {length_ft:.2f} ft exceeds stock lengths {lengths}; "
        f"using special-order {special} ft"
    )
    return special


def nominal_dimensions(size: str) -> tuple[int, int]:
    """Nominal thickness and width in inches of a size key, e.g. "2x8" -> (2, 8)."""
    thickness, _, width = size.partition("x")
    try:
        return int(thickness), int(width)
    except ValueError:
        raise ValueError(f"Not a nominal lumber size: {size!r}") from None


def board_feet(size: str, length_ft: float, prices: PriceBook) -> float:
    """Board feet for one piece from nominal dimensions.

    A 2x8 twelve feet long is 2 x 8 x 12 / 12 = 16 board feet, the lumber
    trade measure, not the dressed 1.5 x 7.25 section.
    """
    if size not in prices.lumber:
        raise KeyError(size)
    thickness, width = nominal_dimensions(size)
    return thickness * width * length_ft / 12


def hanger_model(prefix: str, joist_size: str) -> str:
    """Catalogue key of a hanger for a joist size, e.g. ("LUS", "2x8") -> "LUS28"."""
    return f"{prefix}{joist_size.replace('x', '')}"


_DIMENSIONAL_LENGTHS = (8, 10, 12, 14, 16, 20)


@lru_cache(maxsize=1)
def default_price_book() -> PriceBook:
    """Built-in price snapshot (cached, immutable)."""
    hardware: dict[str, HardwarePrice] = {}
    for size, (lus_cost, lssu_cost) in {
        "2x6": (3.50, 4.25),
        "2x8": (3.75, 4.50),
        "2x10": (4.00, 4.75),
        "2x12": (4.50, 5.25),
    }.items():
        lus = hanger_model("LUS", size)
        lssu = hanger_model("LSSU", size)
        hardware[lus] = HardwarePrice(
            description=f"{lus} joist hanger", cost=lus_cost, nails_required=10
        )
        hardware[lssu] = HardwarePrice(
            description=f"{lssu} concealed flange hanger",
            cost=lssu_cost,
            nails_required=8,
            screws_required=4,
        )
    hardware.update(
        {
            "H1": HardwarePrice(description="H1 hurricane tie", cost=2.50, nails_required=8),
            "H2.5A": HardwarePrice(
                description="H2.5A hurricane tie", cost=4.75, nails_required=10
            ),
            "DTT1Z": HardwarePrice(
                description="DTT1Z tension tie", cost=8.50, screws_required=6
            ),
            "BC6": HardwarePrice(description="BC6 post cap", cost=28.00, screws_required=8),
            "PB66": HardwarePrice(description="PB66 post base", cost=35.00, screws_required=4),
        }
    )
    return PriceBook(
        lumber={
            "2x6": LumberPrice(cost_per_foot=2.50),
            "2x8": LumberPrice(cost_per_foot=3.25),
            "2x10": LumberPrice(cost_per_foot=4.50),
            "2x12": LumberPrice(cost_per_foot=5.75),
            "6x6": LumberPrice(cost_per_foot=12.00),
        },
        stock_lengths={
            "2x6": _DIMENSIONAL_LENGTHS,
            "2x8": _DIMENSIONAL_LENGTHS,
            "2x10": _DIMENSIONAL_LENGTHS,
            "2x12": _DIMENSIONAL_LENGTHS,
            "6x6": (8, 10, 12),
        },
        species_multipliers={
            SpeciesGrade.SPF_2: 1.0,
            SpeciesGrade.DF_1: 1.35,
            SpeciesGrade.HF_2: 1.15,
            SpeciesGrade.SP_2: 1.25,
        },
        hardware=hardware,
        fasteners={
            "hanger_nails": FastenerPack(
                description='Hanger nails 1-1/2" x 0.148"', pack_size=100, pack_cost=12.50
            ),
            "sds_screws": FastenerPack(
                description='SDS25 structural screws 1/4" x 2-1/2"',
                pack_size=50,
                pack_cost=18.75,
            ),
            "ledger_lags": FastenerPack(
                description='Ledger lag screws 1/2" x 6"', pack_size=1, pack_cost=2.75
            ),
        },
        footings={
            FootingType.HELICAL: 500.00,
            FootingType.CONCRETE: 150.00,
            FootingType.SURFACE: 75.00,
        },
    )
