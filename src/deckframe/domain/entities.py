"""Domain entities produced by a single engine run.

Every entity is created fresh for each request and never mutated
afterwards, so all of them are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .value_objects import (
    JOIST_SPACINGS,
    POST_SIZE,
    Attachment,
    BeamPosition,
    BeamStyle,
    DeckingType,
    FootingType,
    JoistOrientation,
    OptimizationGoal,
    SpeciesGrade,
)


@dataclass(frozen=True)
class StructureRequest:
    """Validated deck design request.

    Attributes:
        width_ft: Plan width in feet.
        length_ft: Plan length in feet.
        height_ft: Deck height above grade in feet.
        attachment: Ledger-attached or free-standing.
        footing_type: Foundation used under every post.
        species_grade: Lumber species and grade.
        decking_type: Decking product laid on the joists.
        beam_style_outer: Requested outer beam style, or None to resolve by policy.
        beam_style_inner: Requested inner beam style, or None to resolve by policy.
        forced_joist_spacing_in: Joist spacing to use instead of searching.
        optimization_goal: Tie-break objective between compliant framings.
    """

    width_ft: float
    length_ft: float
    height_ft: float
    attachment: Attachment
    footing_type: FootingType
    species_grade: SpeciesGrade
    decking_type: DeckingType
    beam_style_outer: BeamStyle | None = None
    beam_style_inner: BeamStyle | None = None
    forced_joist_spacing_in: int | None = None
    optimization_goal: OptimizationGoal = OptimizationGoal.COST

    def __post_init__(self) -> None:
        if self.width_ft <= 0:
            raise ValueError("width_ft must be greater than 0")
        if self.length_ft <= 0:
            raise ValueError("length_ft must be greater than 0")
        if self.height_ft < 0:
            raise ValueError("height_ft must be >= 0")
        if (
            self.forced_joist_spacing_in is not None
            and self.forced_joist_spacing_in not in JOIST_SPACINGS
        ):
            raise ValueError(
                f"forced_joist_spacing_in must be one of {JOIST_SPACINGS}"
            )
        if (
            self.footing_type == FootingType.SURFACE
            and self.height_ft >= 2.5
            and self.attachment == Attachment.LEDGER
        ):
            raise ValueError(
                "Surface footings are not allowed at 2.5 ft or higher with a ledger"
            )

    def to_dict(self) -> dict[str, Any]:
        """Echo of the request using the wire field names."""
        return {
            "width_ft": self.width_ft,
            "length_ft": self.length_ft,
            "height_ft": self.height_ft,
            "attachment": self.attachment.value,
            "beam_style_outer": _enum_value(self.beam_style_outer),
            "beam_style_inner": _enum_value(self.beam_style_inner),
            "footing_type": self.footing_type.value,
            "species_grade": self.species_grade.value,
            "forced_joist_spacing_in": self.forced_joist_spacing_in,
            "decking_type": self.decking_type.value,
            "optimization_goal": self.optimization_goal.value,
        }


@dataclass(frozen=True)
class JoistSpec:
    """Selected joist framing.

    Attributes:
        size: Nominal size, e.g. "2x8".
        spacing_in: On-center spacing in inches.
        span_ft: Full joist run (the short plan dimension).
        cantilever_ft: Length past the outer beam.
        orientation: Plan axis the joists run along.
        count: Number of joists including both end joists.
        allowable_span_ft: Table span for this size and spacing.
    """

    size: str
    spacing_in: int
    span_ft: float
    cantilever_ft: float
    orientation: JoistOrientation
    count: int
    allowable_span_ft: float

    def __post_init__(self) -> None:
        if self.spacing_in <= 0:
            raise ValueError("Joist spacing must be positive")
        if self.span_ft <= 0:
            raise ValueError("Joist span must be positive")
        if self.cantilever_ft < 0:
            raise ValueError("Cantilever must be non-negative")
        if self.cantilever_ft >= self.span_ft:
            raise ValueError("Cantilever must be shorter than the joist run")
        if self.count < 2:
            raise ValueError("At least two joists are required")

    @property
    def back_span_ft(self) -> float:
        """Supported portion of the run, between bearings."""
        return round(self.span_ft - self.cantilever_ft, 4)

    @property
    def total_length_ft(self) -> float:
        """Member length: back-span plus cantilever."""
        return round(self.back_span_ft + self.cantilever_ft, 4)

    @property
    def end_joist_count(self) -> int:
        """End joists, which take concealed-flange hangers."""
        return min(2, self.count)

    @property
    def interior_joist_count(self) -> int:
        return self.count - self.end_joist_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "spacing_in": self.spacing_in,
            "span_ft": self.span_ft,
            "back_span_ft": self.back_span_ft,
            "cantilever_ft": self.cantilever_ft,
            "orientation": self.orientation.value,
            "count": self.count,
            "total_length_ft": self.total_length_ft,
        }


@dataclass(frozen=True)
class BeamSegment:
    """A continuous length of beam between its ends.

    Attributes:
        start_ft: Offset of the segment start along the beam.
        end_ft: Offset of the segment end along the beam.
        splice: Whether the segment ends at a splice. Always False today.
    """

    start_ft: float
    end_ft: float
    splice: bool = False

    def __post_init__(self) -> None:
        if self.end_ft <= self.start_ft:
            raise ValueError("Segment end must be after its start")

    @property
    def length_ft(self) -> float:
        return round(self.end_ft - self.start_ft, 4)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_ft": self.start_ft,
            "end_ft": self.end_ft,
            "length_ft": self.length_ft,
            "splice": self.splice,
        }


@dataclass(frozen=True)
class BeamSpec:
    """A beam, or the ledger standing in for the inner beam.

    Ledger entries carry no size, plies or posts.

    Attributes:
        position: Outer or inner.
        style: Drop, inline or ledger.
        span_ft: Beam length (the long plan dimension).
        ply_count: Number of laminations.
        dimension: Nominal lumber of each ply, e.g. "2x10".
        post_spacing_ft: Actual uniform spacing between posts.
        post_count: Posts under this beam.
        allowable_span_ft: Table span at the rounded joist-span key.
        segments: Continuous beam segments.
    """

    position: BeamPosition
    style: BeamStyle
    span_ft: float
    ply_count: int | None = None
    dimension: str | None = None
    post_spacing_ft: float | None = None
    post_count: int = 0
    allowable_span_ft: float | None = None
    segments: tuple[BeamSegment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.span_ft <= 0:
            raise ValueError("Beam span must be positive")
        if self.style == BeamStyle.LEDGER:
            if self.position != BeamPosition.INNER:
                raise ValueError("Only the inner position can be a ledger")
            return
        if not self.ply_count or self.ply_count < 1:
            raise ValueError("Beam ply count must be at least 1")
        if not self.dimension:
            raise ValueError("Beam dimension is required")
        if self.post_count < 2:
            raise ValueError("A beam needs at least two posts")

    @classmethod
    def ledger(cls, span_ft: float) -> BeamSpec:
        """Create the ledger entry for a ledger-attached deck."""
        return cls(position=BeamPosition.INNER, style=BeamStyle.LEDGER, span_ft=span_ft)

    @property
    def is_ledger(self) -> bool:
        return self.style == BeamStyle.LEDGER

    @property
    def size(self) -> str | None:
        """Table key such as "(3)2x10"."""
        if self.is_ledger:
            return None
        return f"({self.ply_count}){self.dimension}"

    @property
    def spliced(self) -> bool:
        return any(segment.splice for segment in self.segments)

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position.value,
            "style": self.style.value,
            "size": self.size,
            "span_ft": self.span_ft,
            "post_spacing_ft": self.post_spacing_ft,
            "post_count": self.post_count,
            "dimension": self.dimension,
            "ply_count": self.ply_count,
            "segments": [segment.to_dict() for segment in self.segments],
            "spliced": self.spliced,
        }


@dataclass(frozen=True)
class PostSpec:
    """A post under a beam.

    Attributes:
        x_ft: Along-beam coordinate from the deck origin.
        y_ft: Across-deck coordinate from the deck origin.
        beam: Beam this post supports.
        height_ft: Post length above the footing.
        size: Nominal post size.
    """

    x_ft: float
    y_ft: float
    beam: BeamPosition
    height_ft: float
    size: str = POST_SIZE

    def __post_init__(self) -> None:
        if self.height_ft <= 0:
            raise ValueError("Post height must be positive")

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x_ft,
            "y": self.y_ft,
            "beam": self.beam.value,
            "height_ft": self.height_ft,
            "size": self.size,
        }


@dataclass(frozen=True)
class FramePlan:
    """Joists, beams and posts selected for one deck."""

    joists: JoistSpec
    beams: tuple[BeamSpec, ...]
    posts: tuple[PostSpec, ...]

    @property
    def has_ledger(self) -> bool:
        return any(beam.is_ledger for beam in self.beams)

    @property
    def supported_beams(self) -> tuple[BeamSpec, ...]:
        """Beams that stand on posts."""
        return tuple(beam for beam in self.beams if not beam.is_ledger)

    @property
    def drop_beam_count(self) -> int:
        return sum(1 for beam in self.beams if beam.style == BeamStyle.DROP)

    @property
    def inline_beam_count(self) -> int:
        return sum(1 for beam in self.beams if beam.style == BeamStyle.INLINE)

    @property
    def long_dimension_ft(self) -> float:
        return self.beams[0].span_ft


def _enum_value(value: Any) -> Any:
    return value.value if value is not None else None
