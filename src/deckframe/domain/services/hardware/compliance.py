"""Hardware compliance checks.

Every rule here produces a warning string; none of them raise.
"""

from __future__ import annotations

import logging
import math

from deckframe.domain.entities import FramePlan

from .calculator import (
    HEAVY_TIE_CANTILEVER_FT,
    HEAVY_TIE_MODEL,
    NAIL_KIND,
    SCREW_KIND,
    TENSION_TIE_INTERVAL,
    TENSION_TIE_MODEL,
)
from .models import HardwareSchedule

logger = logging.getLogger(__name__)

_HANGER_PREFIXES = ("LUS", "LSSU")
_POST_CAP_PREFIXES = ("BC", "CBSQ")


def validate_hardware_compliance(
    frame: FramePlan, hardware: HardwareSchedule
) -> list[str]:
    """Cross-check hardware quantities against what the frame requires.

    Args:
        frame: Selected joists, beams and posts.
        hardware: Schedule produced for the frame.

    Returns:
        Warning messages, empty when the hardware is complete.
    """
    warnings: list[str] = []
    joists = frame.joists

    if frame.has_ledger:
        hangers = hardware.quantity_of(*_HANGER_PREFIXES)
        if hangers < joists.count:
            warnings.append(
                f"Joist hangers ({hangers}) fewer than joists at ledger ({joists.count})"
            )
        if hardware.quantity_of("LSSU") == 0:
            warnings.append("Concealed flange hangers missing for end joists")
        required_ties = math.ceil(joists.count / TENSION_TIE_INTERVAL)
        ties = hardware.quantity_of(TENSION_TIE_MODEL)
        if ties < required_ties:
            warnings.append(
                f"{TENSION_TIE_MODEL} tension ties ({ties}) below required {required_ties}"
            )

    if joists.cantilever_ft > HEAVY_TIE_CANTILEVER_FT and not hardware.quantity_of(
        HEAVY_TIE_MODEL
    ):
        warnings.append(
            f"{HEAVY_TIE_MODEL} hurricane ties required for "
            f"{joists.cantilever_ft} ft cantilever"
        )

    post_count = len(frame.posts)
    caps = hardware.quantity_of(*_POST_CAP_PREFIXES)
    if caps < post_count:
        warnings.append(f"Post caps ({caps}) fewer than posts ({post_count})")

    if hardware.nails_required > 0 and hardware.fastener_count(NAIL_KIND) == 0:
        warnings.append("Hanger nails required but not included")
    if hardware.screws_required > 0 and hardware.fastener_count(SCREW_KIND) == 0:
        warnings.append("Structural screws required but not included")

    if warnings:
        logger.info(f"Hardware compliance: {len(warnings)} warning(s)")
    return warnings
