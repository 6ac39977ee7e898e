"""Hardware data models.

This module provides dataclasses for:
- HardwareItem: a quantity of one connector model
- FastenerItem: loose fasteners rounded up to whole boxes or packs
- HardwareSchedule: every connector and fastener a frame needs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HardwareItem:
    """A connector model and how many are needed.

    Attributes:
        model: Catalogue key, e.g. "LUS28".
        description: Display name.
        quantity: Units required.
        unit_cost: Cost per unit in dollars.
        nails_per_unit: Hanger nails each unit takes.
        screws_per_unit: Structural screws each unit takes.
        notes: Where the item is installed.
    """

    model: str
    description: str
    quantity: int
    unit_cost: float
    nails_per_unit: int = 0
    screws_per_unit: int = 0
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Hardware quantity must be non-negative")
        if self.unit_cost < 0:
            raise ValueError("Hardware unit cost must be non-negative")

    @property
    def extended_cost(self) -> float:
        return round(self.quantity * self.unit_cost, 2)

    @property
    def nails_required(self) -> int:
        return self.quantity * self.nails_per_unit

    @property
    def screws_required(self) -> int:
        return self.quantity * self.screws_per_unit

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "description": self.description,
            "quantity": self.quantity,
            "unit_cost": self.unit_cost,
            "extended_cost": self.extended_cost,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class FastenerItem:
    """Loose fasteners bought by the box or pack.

    Attributes:
        kind: Catalogue key, e.g. "hanger_nails".
        description: Display name.
        required: Individual fasteners needed.
        packs: Boxes or packs to buy.
        pack_size: Fasteners per pack.
        pack_cost: Cost per pack in dollars.
    """

    kind: str
    description: str
    required: int
    packs: int
    pack_size: int
    pack_cost: float

    @property
    def extended_cost(self) -> float:
        return round(self.packs * self.pack_cost, 2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "description": self.description,
            "required": self.required,
            "packs": self.packs,
            "pack_size": self.pack_size,
            "pack_cost": self.pack_cost,
            "extended_cost": self.extended_cost,
        }


@dataclass(frozen=True)
class HardwareSchedule:
    """All hardware needed for one frame, grouped the way it is installed.

    Attributes:
        joist_hangers: Face-mount and concealed-flange hangers.
        structural_ties: Tension ties and hurricane ties.
        post_connections: Post caps and post bases.
        fasteners: Nails and screws, in packs.
    """

    joist_hangers: tuple[HardwareItem, ...] = field(default_factory=tuple)
    structural_ties: tuple[HardwareItem, ...] = field(default_factory=tuple)
    post_connections: tuple[HardwareItem, ...] = field(default_factory=tuple)
    fasteners: tuple[FastenerItem, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> HardwareSchedule:
        """Schedule with no items, used when calculation fails."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not (
            self.joist_hangers
            or self.structural_ties
            or self.post_connections
            or self.fasteners
        )

    @property
    def items(self) -> tuple[HardwareItem, ...]:
        """Every connector, in install-group order."""
        return self.joist_hangers + self.structural_ties + self.post_connections

    def quantity_of(self, *prefixes: str) -> int:
        """Total units whose model starts with any of the given prefixes."""
        return sum(
            item.quantity for item in self.items if item.model.startswith(prefixes)
        )

    def fastener_count(self, kind: str) -> int:
        return sum(item.required for item in self.fasteners if item.kind == kind)

    @property
    def nails_required(self) -> int:
        return sum(item.nails_required for item in self.items)

    @property
    def screws_required(self) -> int:
        return sum(item.screws_required for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "joist_hangers": [item.to_dict() for item in self.joist_hangers],
            "structural_ties": [item.to_dict() for item in self.structural_ties],
            "post_connections": [item.to_dict() for item in self.post_connections],
            "fasteners": [item.to_dict() for item in self.fasteners],
        }
