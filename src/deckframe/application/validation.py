"""Structure request validation.

This module checks a raw request record (as decoded from JSON or a web
body) against StructureRequestSchema and either produces a typed
StructureRequest or reports every problem found. Pydantic errors are
mapped onto the stable ValidationErrorCode set so callers see the same
codes whichever surface the request came through.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from deckframe.application.config.schemas import StructureRequestSchema
from deckframe.domain.entities import StructureRequest
from deckframe.domain.errors import ValidationError, ValidationErrorCode

logger = logging.getLogger(__name__)

# Pydantic error types and the validation code each one reports as.
PYDANTIC_ERROR_CODES: dict[str, ValidationErrorCode] = {
    "missing": ValidationErrorCode.MISSING,
    "float_type": ValidationErrorCode.INVALID_TYPE,
    "int_type": ValidationErrorCode.INVALID_TYPE,
    "int_from_float": ValidationErrorCode.INVALID_TYPE,
    "model_type": ValidationErrorCode.INVALID_TYPE,
    "model_attributes_type": ValidationErrorCode.INVALID_TYPE,
    "dict_type": ValidationErrorCode.INVALID_TYPE,
    "greater_than": ValidationErrorCode.OUT_OF_RANGE,
    "greater_than_equal": ValidationErrorCode.OUT_OF_RANGE,
    "finite_number": ValidationErrorCode.OUT_OF_RANGE,
    "enum": ValidationErrorCode.INVALID_CHOICE,
    "literal_error": ValidationErrorCode.INVALID_CHOICE,
    "illegal_combination": ValidationErrorCode.ILLEGAL_COMBINATION,
}

# Location prefixes FastAPI adds in front of the request field name.
_LOCATION_PREFIXES = ("body",)


@dataclass
class ValidationResult:
    """Either a typed request or the list of everything wrong with the input.

    Attributes:
        errors: Validation failures in field order.
        request: The typed request, set only when there are no errors.
    """

    errors: list[ValidationError] = field(default_factory=list)
    request: StructureRequest | None = None

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 if valid, 1 if there are errors."""
        return 0 if self.is_valid else 1

    @property
    def messages(self) -> list[str]:
        return [f"{error.field}: {error.message}" for error in self.errors]

    def add_error(
        self,
        code: ValidationErrorCode,
        field_name: str,
        message: str,
        value: Any = None,
    ) -> ValidationResult:
        """Add a validation error and return self for chaining."""
        self.errors.append(
            ValidationError(code=code, field=field_name, message=message, value=value)
        )
        return self


def errors_from_pydantic(errors: Iterable[Mapping[str, Any]]) -> list[ValidationError]:
    """Convert pydantic error records into request validation failures.

    Args:
        errors: Records as returned by ``ValidationError.errors()``, from
            either pydantic directly or a FastAPI RequestValidationError.

    Returns:
        One ValidationError per record, in pydantic's order.
    """
    converted = []
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part not in _LOCATION_PREFIXES]
        ctx = err.get("ctx") or {}
        error_type = err.get("type", "")
        code = PYDANTIC_ERROR_CODES.get(error_type, ValidationErrorCode.INVALID_TYPE)
        if loc:
            field_name = str(loc[0])
        else:
            field_name = ctx.get("field", "request")

        if code == ValidationErrorCode.MISSING:
            value = None
        elif "values" in ctx:
            value = ctx["values"]
        else:
            value = err.get("input")
        converted.append(
            ValidationError(code=code, field=field_name, message=err["msg"], value=value)
        )
    return converted


def to_structure_request(schema: StructureRequestSchema) -> StructureRequest:
    """Build the domain request from a validated schema."""
    return StructureRequest(
        width_ft=float(schema.width_ft),
        length_ft=float(schema.length_ft),
        height_ft=float(schema.height_ft),
        attachment=schema.attachment,
        footing_type=schema.footing_type,
        species_grade=schema.species_grade,
        decking_type=schema.decking_type,
        beam_style_outer=schema.beam_style_outer,
        beam_style_inner=schema.beam_style_inner,
        forced_joist_spacing_in=schema.forced_joist_spacing_in,
        optimization_goal=schema.optimization_goal,
    )


def validate_request(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw structure request.

    Checks required fields, numeric types and ranges, enum membership and
    the surface-footing/ledger height rule. Every field-level violation is
    reported; the cross-field rule is checked once the fields are valid.

    Args:
        data: Request record using the wire field names.

    Returns:
        ValidationResult with either the typed request or the errors.
    """
    result = ValidationResult()
    record = dict(data) if isinstance(data, Mapping) else data
    try:
        schema = StructureRequestSchema.model_validate(record)
    except PydanticValidationError as e:
        result.errors.extend(errors_from_pydantic(e.errors()))
        logger.info(f"Request rejected with {len(result.errors)} validation error(s)")
        return result

    unknown = sorted(set(record) - set(StructureRequestSchema.model_fields))
    if unknown:
        logger.debug(f"Ignoring unknown request fields: {unknown}")

    result.request = to_structure_request(schema)
    return result


def validate(data: Mapping[str, Any]) -> list[ValidationError]:
    """Return every validation failure for a request; empty means valid."""
    return validate_request(data).errors
