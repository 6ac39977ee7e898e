"""Hardware calculation service.

This module provides HardwareCalculator for deriving the connectors and
fasteners a deck frame needs from its joists, beams and posts.
"""

from __future__ import annotations

import logging
import math

from deckframe.domain.entities import FramePlan
from deckframe.domain.services.pricing import PriceBook, hanger_model

from .models import FastenerItem, HardwareItem, HardwareSchedule

logger = logging.getLogger(__name__)

# One tension tie for every this many joists along a ledger.
TENSION_TIE_INTERVAL = 4

# Cantilevers longer than this need the heavier hurricane tie.
HEAVY_TIE_CANTILEVER_FT = 2.0

TENSION_TIE_MODEL = "DTT1Z"
LIGHT_TIE_MODEL = "H1"
HEAVY_TIE_MODEL = "H2.5A"
POST_CAP_MODEL = "BC6"
POST_BASE_MODEL = "PB66"
NAIL_KIND = "hanger_nails"
SCREW_KIND = "sds_screws"


class HardwareCalculator:
    """Service for calculating hardware requirements of a deck frame.

    Quantities follow directly from the frame: hangers for every joist end
    that hangs from a ledger or inline beam, ties along the ledger and over
    drop beams, a cap and a base on every post, then the nails and screws
    all of those take.
    """

    def __init__(self, prices: PriceBook) -> None:
        self.prices = prices

    def calculate_hardware(self, frame: FramePlan) -> HardwareSchedule:
        """Calculate every connector and fastener for a frame.

        Args:
            frame: Selected joists, beams and posts.

        Returns:
            HardwareSchedule grouped by installation.

        Raises:
            KeyError: If the price book lacks a required model.
            ValueError: If a quantity cannot be derived.
        """
        hangers = self._joist_hangers(frame)
        ties = self._structural_ties(frame)
        posts = self._post_connections(frame)
        fasteners = self._fasteners(hangers + ties + posts)
        return HardwareSchedule(
            joist_hangers=hangers,
            structural_ties=ties,
            post_connections=posts,
            fasteners=fasteners,
        )

    def _item(self, model: str, quantity: int, notes: str) -> HardwareItem:
        entry = self.prices.hardware_item(model)
        return HardwareItem(
            model=model,
            description=entry.description,
            quantity=quantity,
            unit_cost=entry.cost,
            nails_per_unit=entry.nails_required,
            screws_per_unit=entry.screws_required,
            notes=notes,
        )

    def _joist_hangers(self, frame: FramePlan) -> tuple[HardwareItem, ...]:
        """Hangers for each row of joist ends that hang from a face.

        A row is the ledger or an inline beam. Interior joists take standard
        face-mount hangers; the two end joists take concealed-flange hangers.
        """
        rows = (1 if frame.has_ledger else 0) + frame.inline_beam_count
        if rows == 0:
            return ()

        joists = frame.joists
        items: list[HardwareItem] = []
        if joists.interior_joist_count > 0:
            items.append(
                self._item(
                    hanger_model("LUS", joists.size),
                    joists.interior_joist_count * rows,
                    "Interior joists",
                )
            )
        items.append(
            self._item(
                hanger_model("LSSU", joists.size),
                joists.end_joist_count * rows,
                "End joists",
            )
        )
        return tuple(items)

    def _structural_ties(self, frame: FramePlan) -> tuple[HardwareItem, ...]:
        items: list[HardwareItem] = []
        joists = frame.joists

        if frame.has_ledger:
            items.append(
                self._item(
                    TENSION_TIE_MODEL,
                    math.ceil(joists.count / TENSION_TIE_INTERVAL),
                    f"Ledger, every {TENSION_TIE_INTERVAL}th joist",
                )
            )

        drop_beams = frame.drop_beam_count
        if drop_beams:
            model = (
                HEAVY_TIE_MODEL
                if joists.cantilever_ft > HEAVY_TIE_CANTILEVER_FT
                else LIGHT_TIE_MODEL
            )
            items.append(
                self._item(model, joists.count * drop_beams, "Joists to drop beam")
            )
        return tuple(items)

    def _post_connections(self, frame: FramePlan) -> tuple[HardwareItem, ...]:
        post_count = len(frame.posts)
        if post_count == 0:
            return ()
        return (
            self._item(POST_CAP_MODEL, post_count, "Beam to post"),
            self._item(POST_BASE_MODEL, post_count, "Post to footing"),
        )

    def _fasteners(self, items: tuple[HardwareItem, ...]) -> tuple[FastenerItem, ...]:
        """Round the nails and screws the connectors take up to whole packs."""
        fasteners: list[FastenerItem] = []
        for kind, required in (
            (NAIL_KIND, sum(item.nails_required for item in items)),
            (SCREW_KIND, sum(item.screws_required for item in items)),
        ):
            if required <= 0:
                continue
            pack = self.prices.fastener(kind)
            fasteners.append(
                FastenerItem(
                    kind=kind,
                    description=pack.description,
                    required=required,
                    packs=pack.packs_for(required),
                    pack_size=pack.pack_size,
                    pack_cost=pack.pack_cost,
                )
            )
        return tuple(fasteners)


def calculate_hardware(frame: FramePlan, prices: PriceBook) -> HardwareSchedule:
    """Calculate hardware, degrading to an empty schedule on failure.

    Hardware never blocks structure generation: a missing catalogue entry
    or an underivable quantity is logged and an empty schedule returned,
    which the compliance validator then reports as warnings.
    """
    try:
        return HardwareCalculator(prices).calculate_hardware(frame)
    except (KeyError, ValueError) as e:
        logger.warning(f"Hardware calculation failed, continuing without hardware: {e!r}")
        return HardwareSchedule.empty()
