"""Material takeoff generation.

Turns a selected frame into purchasable line items: stock-length lumber,
footings, connectors and fasteners. Every line carries its unit and
extended cost so that nothing downstream has to look prices up again.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

from deckframe.domain.entities import BeamSpec, FramePlan
from deckframe.domain.value_objects import (
    POST_SIZE,
    FootingType,
    SpeciesGrade,
    TakeoffCategory,
)

from .hardware import HardwareItem, HardwareSchedule, calculate_hardware
from .pricing import PriceBook

logger = logging.getLogger(__name__)

# Two lag screws per row, one row every 16 in along the ledger.
LEDGER_LAG_SPACING_IN = 16
LEDGER_LAGS_PER_ROW = 2
LEDGER_LAG_KIND = "ledger_lags"


@dataclass(frozen=True)
class TakeoffItem:
    """One purchasable line of the material takeoff.

    Attributes:
        description: Display text.
        quantity: Pieces, units or packs to buy.
        unit: "ea", "box" or "pack".
        unit_cost: Cost per unit in dollars.
        category: Top-level grouping.
        subcategory: Structured tag within the category, e.g. "joists".
        size: Nominal lumber size for lumber lines.
        length_ft: Stock length for lumber lines.
        board_feet: Total board feet of the line (lumber only).
    """

    description: str
    quantity: int
    unit: str
    unit_cost: float
    category: TakeoffCategory
    subcategory: str
    size: str | None = None
    length_ft: float | None = None
    board_feet: float = 0.0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Takeoff quantity must be non-negative")

    @property
    def extended_cost(self) -> float:
        return round(self.quantity * self.unit_cost, 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unit": self.unit,
            "unit_cost": self.unit_cost,
            "extended_cost": self.extended_cost,
            "category": self.category.value,
            "subcategory": self.subcategory,
            "size": self.size,
            "length_ft": self.length_ft,
            "board_feet": round(self.board_feet, 2),
        }


@dataclass(frozen=True)
class MaterialTakeoff:
    """Takeoff lines, board-foot totals and the hardware behind them."""

    items: tuple[TakeoffItem, ...]
    board_feet: dict[str, float] = field(default_factory=dict)
    total_board_feet: float = 0.0
    hardware: HardwareSchedule = field(default_factory=HardwareSchedule.empty)

    @property
    def total_cost(self) -> float:
        return round(sum(item.extended_cost for item in self.items), 2)

    def by_category(self, category: TakeoffCategory) -> list[TakeoffItem]:
        return [item for item in self.items if item.category == category]

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "board_feet": dict(self.board_feet),
            "total_board_feet": self.total_board_feet,
            "total_cost": self.total_cost,
            "hardware": self.hardware.to_dict(),
        }


class TakeoffGenerator:
    """Builds the material takeoff for one frame.

    Args:
        prices: Price snapshot for costs, stock lengths and cross-sections.
        species: Species/grade, which scales lumber costs.
        footing: Footing type priced once per post.
    """

    def __init__(
        self, prices: PriceBook, species: SpeciesGrade, footing: FootingType
    ) -> None:
        self.prices = prices
        self.species = species
        self.footing = footing

    def generate(self, frame: FramePlan) -> MaterialTakeoff:
        items: list[TakeoffItem] = []
        items.extend(self._joists(frame))
        items.extend(self._rim_joists(frame))
        items.extend(self._ledger(frame))
        for beam in frame.supported_beams:
            items.append(self._beam_plies(beam))
        items.extend(self._posts(frame))
        items.extend(self._footings(frame))

        hardware = calculate_hardware(frame, self.prices)
        items.extend(self._hardware_lines(hardware))

        board_feet: dict[str, float] = defaultdict(float)
        for item in items:
            if item.size is not None and item.board_feet:
                board_feet[item.size] += item.board_feet
        per_size = {size: round(total, 1) for size, total in board_feet.items()}
        total = round(sum(board_feet.values()), 1)

        logger.debug(f"Takeoff: {len(items)} lines, {total} board ft")
        return MaterialTakeoff(
            items=tuple(items),
            board_feet=per_size,
            total_board_feet=total,
            hardware=hardware,
        )

    def _lumber(
        self,
        description: str,
        size: str,
        stock_ft: int,
        quantity: int,
        subcategory: str,
    ) -> TakeoffItem:
        unit_cost = round(
            stock_ft * self.prices.lumber_cost_per_foot(size, self.species), 2
        )
        return TakeoffItem(
            description=f"{size} x {stock_ft}' {description}",
            quantity=quantity,
            unit="ea",
            unit_cost=unit_cost,
            category=TakeoffCategory.LUMBER,
            subcategory=subcategory,
            size=size,
            length_ft=stock_ft,
            board_feet=quantity * self.prices.board_feet(size, stock_ft),
        )

    def _pieces(self, length_ft: float, size: str) -> tuple[int, int]:
        """Split a run into equal stock pieces: (piece count, stock length)."""
        longest = max(self.prices.stock_lengths[size])
        pieces = max(1, math.ceil(length_ft / longest - 1e-9))
        return pieces, self.prices.get_stock_length(length_ft / pieces, size)

    def _joists(self, frame: FramePlan) -> list[TakeoffItem]:
        joists = frame.joists
        stock = self.prices.get_stock_length(joists.total_length_ft, joists.size)
        return [self._lumber("joist", joists.size, stock, joists.count, "joists")]

    def _rim_joists(self, frame: FramePlan) -> list[TakeoffItem]:
        """Rim joists cap the joist ends that sit on a drop beam."""
        if frame.drop_beam_count == 0:
            return []
        rims = 1 if frame.has_ledger else 2
        size = frame.joists.size
        pieces, stock = self._pieces(frame.long_dimension_ft, size)
        return [self._lumber("rim joist", size, stock, rims * pieces, "rim_joists")]

    def _ledger(self, frame: FramePlan) -> list[TakeoffItem]:
        if not frame.has_ledger:
            return []
        size = frame.joists.size
        pieces, stock = self._pieces(frame.long_dimension_ft, size)
        rows = math.ceil(frame.long_dimension_ft * 12 / LEDGER_LAG_SPACING_IN - 1e-9) + 1
        lags = self.prices.fastener(LEDGER_LAG_KIND)
        return [
            self._lumber("ledger board", size, stock, pieces, "ledger"),
            TakeoffItem(
                description=lags.description,
                quantity=lags.packs_for(rows * LEDGER_LAGS_PER_ROW),
                unit="ea" if lags.pack_size == 1 else "pack",
                unit_cost=lags.pack_cost,
                category=TakeoffCategory.FASTENERS,
                subcategory=LEDGER_LAG_KIND,
            ),
        ]

    def _beam_plies(self, beam: BeamSpec) -> TakeoffItem:
        """One full-length piece per ply; beams are never spliced."""
        stock = self.prices.get_stock_length(beam.span_ft, beam.dimension)
        return self._lumber(
            f"{beam.position.value} beam ply ({beam.style.value} {beam.size})",
            beam.dimension,
            stock,
            beam.ply_count,
            "beams",
        )

    def _posts(self, frame: FramePlan) -> list[TakeoffItem]:
        by_length: dict[int, int] = defaultdict(int)
        for post in frame.posts:
            by_length[self.prices.get_stock_length(post.height_ft, POST_SIZE)] += 1
        return [
            self._lumber("post", POST_SIZE, stock, count, "posts")
            for stock, count in sorted(by_length.items())
        ]

    def _footings(self, frame: FramePlan) -> list[TakeoffItem]:
        if not frame.posts:
            return []
        return [
            TakeoffItem(
                description=f"{self.footing.value.capitalize()} footing",
                quantity=len(frame.posts),
                unit="ea",
                unit_cost=self.prices.footing_cost(self.footing),
                category=TakeoffCategory.FOOTINGS,
                subcategory=self.footing.value,
            )
        ]

    def _hardware_lines(self, hardware: HardwareSchedule) -> list[TakeoffItem]:
        lines: list[TakeoffItem] = []
        groups: tuple[tuple[str, tuple[HardwareItem, ...]], ...] = (
            ("joist_hangers", hardware.joist_hangers),
            ("structural_ties", hardware.structural_ties),
            ("post_connections", hardware.post_connections),
        )
        for subcategory, group in groups:
            for item in group:
                lines.append(
                    TakeoffItem(
                        description=item.description,
                        quantity=item.quantity,
                        unit="ea",
                        unit_cost=item.unit_cost,
                        category=TakeoffCategory.HARDWARE,
                        subcategory=subcategory,
                    )
                )
        for fastener in hardware.fasteners:
            lines.append(
                TakeoffItem(
                    description=f"{fastener.description} ({fastener.pack_size}/pack)",
                    quantity=fastener.packs,
                    unit="box" if fastener.pack_size >= 100 else "pack",
                    unit_cost=fastener.pack_cost,
                    category=TakeoffCategory.FASTENERS,
                    subcategory=fastener.kind,
                )
            )
        return lines


def generate_takeoff(
    frame: FramePlan,
    species: SpeciesGrade,
    footing: FootingType,
    prices: PriceBook,
) -> MaterialTakeoff:
    """Build the material takeoff for a frame (see TakeoffGenerator)."""
    return TakeoffGenerator(prices, species, footing).generate(frame)
