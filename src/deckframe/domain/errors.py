"""Engine and request validation failure types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValidationErrorCode(str, Enum):
    """Stable codes for request validation failures."""

    MISSING = "missing"
    INVALID_TYPE = "invalid_type"
    OUT_OF_RANGE = "out_of_range"
    INVALID_CHOICE = "invalid_choice"
    ILLEGAL_COMBINATION = "illegal_combination"


@dataclass
class ValidationError:
    """A single request validation failure.

    Attributes:
        code: Machine-readable failure kind.
        field: Request field at fault (first field for cross-field rules).
        message: Human-readable description.
        value: The offending value, when there is one.
    """

    code: ValidationErrorCode
    field: str
    message: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "field": self.field,
            "message": self.message,
            "value": self.value,
        }


class EngineErrorCode(str, Enum):
    """Machine-readable failure codes returned at the engine boundary.

    Attributes:
        INVALID_INPUT: The request failed validation; nothing was computed.
        SPECIES_UNKNOWN: A recognized species is missing from a span table.
        SPAN_EXCEEDED: No member configuration satisfies the required span.
    """

    INVALID_INPUT = "INVALID_INPUT"
    SPECIES_UNKNOWN = "SPECIES_UNKNOWN"
    SPAN_EXCEEDED = "SPAN_EXCEEDED"


class EngineError(Exception):
    """Raised when the engine cannot produce a structure.

    Attributes:
        code: Failure code.
        message: Human-readable explanation.
        details: Structured validation failures for INVALID_INPUT.
    """

    def __init__(
        self,
        code: EngineErrorCode,
        message: str,
        details: list[ValidationError] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = list(details or [])
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged error record."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": [detail.to_dict() for detail in self.details],
        }
