"""Output formatters for structure results."""

from __future__ import annotations

import csv
import io
import json
from typing import TYPE_CHECKING

from deckframe.domain.services.span_tables import format_feet_inches
from deckframe.domain.value_objects import TakeoffCategory

if TYPE_CHECKING:
    from deckframe.application.dtos import StructureResult
    from deckframe.application.validation import ValidationResult
    from deckframe.domain.services.span_tables import SpanTables
    from deckframe.domain.value_objects import SpeciesGrade


class StructureReportFormatter:
    """Formats a structure result as a readable report."""

    def format(self, result: "StructureResult") -> str:
        request = result.request
        joists = result.frame.joists
        lines = [
            "DECK STRUCTURE",
            "=" * 70,
            f"Deck: {request.width_ft:g} x {request.length_ft:g} ft at "
            f"{request.height_ft:g} ft, {request.attachment.value}, "
            f"{request.footing_type.value} footings",
            f"Lumber: {request.species_grade.value}   Decking: {request.decking_type.value}"
            f"   Goal: {request.optimization_goal.value}",
            "",
            "JOISTS",
            "-" * 70,
            f"  {joists.count} x {joists.size} @ {joists.spacing_in}\" o.c. "
            f"({joists.orientation.value})",
            f"  Span {format_feet_inches(joists.span_ft)}, back-span "
            f"{format_feet_inches(joists.back_span_ft)}, cantilever "
            f"{format_feet_inches(joists.cantilever_ft)}",
            "",
            "BEAMS",
            "-" * 70,
        ]
        for beam in result.frame.beams:
            if beam.is_ledger:
                lines.append(
                    f"  {beam.position.value:<6} ledger, {format_feet_inches(beam.span_ft)}"
                )
                continue
            lines.append(
                f"  {beam.position.value:<6} {beam.style.value:<7} {beam.size:<9} "
                f"{beam.post_count} posts @ {format_feet_inches(beam.post_spacing_ft)}"
            )

        lines.extend(["", f"POSTS ({len(result.frame.posts)})", "-" * 70])
        for post in result.frame.posts:
            lines.append(
                f"  {post.beam.value:<6} x={post.x_ft:>6.2f}  y={post.y_ft:>6.2f}  "
                f"{post.size} x {post.height_ft:.2f} ft"
            )

        lines.extend(["", TakeoffReportFormatter().format(result)])
        lines.extend(["", ComplianceFormatter().format(result)])
        return "\n".join(lines)


class TakeoffReportFormatter:
    """Formats the material takeoff grouped by category."""

    def format(self, result: "StructureResult") -> str:
        takeoff = result.takeoff
        lines = [
            "MATERIAL TAKEOFF",
            "=" * 70,
            f"{'Item':<42} {'Qty':>5} {'Unit $':>9} {'Total $':>10}",
            "-" * 70,
        ]
        for category in TakeoffCategory:
            items = takeoff.by_category(category)
            if not items:
                continue
            lines.append(category.value.upper())
            for item in items:
                lines.append(
                    f"  {item.description:<40} {item.quantity:>5} "
                    f"{item.unit_cost:>9.2f} {item.extended_cost:>10.2f}"
                )
        lines.append("-" * 70)
        lines.append(f"{'ESTIMATED TOTAL':<58} {takeoff.total_cost:>10.2f}")
        lines.append(f"Board feet: {takeoff.total_board_feet:.1f}")
        for size, total in sorted(takeoff.board_feet.items()):
            lines.append(f"  {size:<6} {total:>8.1f}")
        return "\n".join(lines)


class ComplianceFormatter:
    """Formats the compliance report."""

    def format(self, result: "StructureResult") -> str:
        report = result.compliance
        status = "PASS" if report.passes else "WARNINGS"
        lines = [
            f"COMPLIANCE: {status}",
            f"  Tables: {report.joist_table} (joists), {report.beam_table} (beams)",
        ]
        for assumption in report.assumptions:
            lines.append(f"  Assumes {assumption}")
        for warning in report.warnings:
            lines.append(f"  ! {warning}")
        return "\n".join(lines)


class JsonExporter:
    """Exports a structure result as the JSON output record."""

    def export(self, result: "StructureResult") -> str:
        return json.dumps(result.to_dict(), indent=2)


class CsvTakeoffExporter:
    """Exports the material takeoff as CSV."""

    HEADER = (
        "Category",
        "Subcategory",
        "Description",
        "Size",
        "Length (ft)",
        "Quantity",
        "Unit",
        "Unit Cost",
        "Total Cost",
        "Board Feet",
    )

    def export(self, result: "StructureResult") -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(self.HEADER)
        for item in result.takeoff.items:
            writer.writerow(
                [
                    item.category.value,
                    item.subcategory,
                    item.description,
                    item.size or "",
                    item.length_ft if item.length_ft is not None else "",
                    item.quantity,
                    item.unit,
                    f"{item.unit_cost:.2f}",
                    f"{item.extended_cost:.2f}",
                    f"{item.board_feet:.2f}" if item.board_feet else "",
                ]
            )
        return output.getvalue()


class ValidationFormatter:
    """Formats request validation results for the CLI."""

    def format(self, result: "ValidationResult") -> str:
        if result.is_valid:
            return "Request is valid."
        lines = [f"Request has {len(result.errors)} error(s):"]
        for error in result.errors:
            suffix = f" (got: {error.value!r})" if error.value is not None else ""
            lines.append(f"  - [{error.code.value}] {error.field}: {error.message}{suffix}")
        return "\n".join(lines)


class SpanTableFormatter:
    """Formats the joist span table for one species."""

    def format(self, tables: "SpanTables", species: "SpeciesGrade") -> str:
        spacings = sorted({s for row in tables.joists[species].values() for s in row})
        lines = [
            f"JOIST SPANS - {species.value}",
            "=" * 40,
            f"{'Size':<8}" + "".join(f'{str(s) + chr(34) + " o.c.":>11}' for s in spacings),
            "-" * 40,
        ]
        for size, row in tables.joists[species].items():
            cells = "".join(
                f"{format_feet_inches(row[s]) if s in row else '-':>11}" for s in spacings
            )
            lines.append(f"{size:<8}{cells}")
        return "\n".join(lines)


FORMATS: tuple[str, ...] = ("text", "json", "csv")


def render(result: "StructureResult", fmt: str = "text") -> str:
    """Render a result in one of FORMATS."""
    if fmt == "json":
        return JsonExporter().export(result)
    if fmt == "csv":
        return CsvTakeoffExporter().export(result)
    if fmt == "text":
        return StructureReportFormatter().format(result)
    raise ValueError(f"Unknown output format: {fmt}")
