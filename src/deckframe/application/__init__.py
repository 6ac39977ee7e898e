"""Application layer - request validation and engine orchestration."""

from .dtos import ComplianceReport, Metrics, StructureResult
from .engine import StructureEngine, compute_structure
from .validation import (
    ValidationError,
    ValidationErrorCode,
    ValidationResult,
    validate,
    validate_request,
)

__all__ = [
    "ComplianceReport",
    "Metrics",
    "StructureEngine",
    "StructureResult",
    "ValidationError",
    "ValidationErrorCode",
    "ValidationResult",
    "compute_structure",
    "validate",
    "validate_request",
]
