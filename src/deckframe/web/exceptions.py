"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deckframe.application.validation import errors_from_pydantic
from deckframe.domain.errors import EngineError, EngineErrorCode

# INVALID_INPUT is the caller's to fix; the other codes mean the deck as
# requested cannot be built from the tables.
ENGINE_ERROR_STATUS: dict[EngineErrorCode, int] = {
    EngineErrorCode.INVALID_INPUT: 422,
    EngineErrorCode.SPECIES_UNKNOWN: 409,
    EngineErrorCode.SPAN_EXCEEDED: 409,
}


def _engine_error_response(exc: EngineError) -> JSONResponse:
    return JSONResponse(
        status_code=ENGINE_ERROR_STATUS.get(exc.code, 400),
        content={
            "error": exc.message,
            "error_type": exc.code.value,
            "details": [detail.to_dict() for detail in exc.details] or None,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(EngineError)
    async def engine_error_handler(request: Request, exc: EngineError) -> JSONResponse:
        return _engine_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = errors_from_pydantic(exc.errors())
        return _engine_error_response(
            EngineError(
                EngineErrorCode.INVALID_INPUT,
                "; ".join(f"{detail.field}: {detail.message}" for detail in details),
                details,
            )
        )
