"""Code compliance re-check of a selected frame.

The selectors only return configurations that fit the tables; this pass
re-derives every limit from the tables and reports anything that slipped
through, together with the hardware compliance warnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from deckframe.domain.entities import FramePlan
from deckframe.domain.value_objects import DeckingType, SpeciesGrade

from .cantilever import MAX_CANTILEVER_RATIO
from .hardware import HardwareSchedule, validate_hardware_compliance
from .span_tables import (
    BEAM_TABLE_CITATION,
    JOIST_TABLE_CITATION,
    SpanTables,
    beam_table_key,
)

logger = logging.getLogger(__name__)

DEFAULT_ASSUMPTIONS: tuple[str, ...] = ("IRC default loads: 40 psf live, 10 psf dead",)


@dataclass(frozen=True)
class ComplianceReport:
    """Pass/fail result with the tables it was checked against.

    Attributes:
        warnings: Every violation found; empty means the frame passes.
        joist_table: Citation of the joist span table.
        beam_table: Citation of the beam span table.
        assumptions: Load assumptions behind the tables.
    """

    warnings: tuple[str, ...] = field(default_factory=tuple)
    joist_table: str = JOIST_TABLE_CITATION
    beam_table: str = BEAM_TABLE_CITATION
    assumptions: tuple[str, ...] = DEFAULT_ASSUMPTIONS

    @property
    def passes(self) -> bool:
        return len(self.warnings) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "passes": self.passes,
            "joist_table": self.joist_table,
            "beam_table": self.beam_table,
            "assumptions": list(self.assumptions),
            "warnings": list(self.warnings),
        }


def structural_warnings(
    frame: FramePlan,
    species: SpeciesGrade,
    decking: DeckingType,
    tables: SpanTables,
) -> list[str]:
    """Warnings from re-checking joists and beams against the span tables."""
    warnings: list[str] = []
    joists = frame.joists

    max_spacing = tables.max_decking_spacing(decking)
    if joists.spacing_in > max_spacing:
        warnings.append(f'{decking.value} requires max {max_spacing}" joist spacing')

    if joists.cantilever_ft > joists.back_span_ft * MAX_CANTILEVER_RATIO + 1e-9:
        warnings.append("Cantilever exceeds 1/4 of back-span")

    key = beam_table_key(joists.span_ft)
    for beam in frame.supported_beams:
        allowable = (
            tables.allowable_beam_span(species, beam.size, key) if key is not None else None
        )
        if allowable is None:
            warnings.append(
                f"{beam.position.value.capitalize()} beam {beam.size} has no table entry "
                f"for {joists.span_ft} ft joists"
            )
        elif beam.post_spacing_ft > allowable + 1e-9:
            warnings.append(
                f"{beam.position.value.capitalize()} beam post spacing "
                f"{beam.post_spacing_ft:.2f} ft exceeds allowable {allowable:.2f} ft"
            )

    allowable_joist = tables.allowable_joist_span(species, joists.size, joists.spacing_in)
    if allowable_joist is None:
        warnings.append(
            f"Joist {joists.size} @ {joists.spacing_in} in has no table entry"
        )
    elif joists.back_span_ft > allowable_joist + 1e-9:
        warnings.append(
            f"Joist span {joists.back_span_ft:.2f} ft exceeds allowable "
            f"{allowable_joist:.2f} ft"
        )
    return warnings


def check_compliance(
    frame: FramePlan,
    species: SpeciesGrade,
    decking: DeckingType,
    tables: SpanTables,
    hardware: HardwareSchedule,
) -> ComplianceReport:
    """Assemble the compliance report for a frame and its hardware."""
    warnings = structural_warnings(frame, species, decking, tables)
    warnings.extend(validate_hardware_compliance(frame, hardware))
    report = ComplianceReport(warnings=tuple(warnings))
    logger.debug(f"Compliance: passes={report.passes}, {len(warnings)} warning(s)")
    return report
