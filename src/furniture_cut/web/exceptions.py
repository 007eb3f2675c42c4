"""Custom exceptions and error handlers for the REST API.

Every error body has the shape ``{"status": <code>, "message": <text>}``;
packing failures add ``unplacedElementIds``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from furniture_cut.application.dtos import PackingFailureReport
from furniture_cut.infrastructure.repository import CuttingSheetNotFoundError

logger = logging.getLogger(__name__)


class RequestValidationFailedError(Exception):
    """Raised when a cut request violates one or more field rules."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class PackingFailedError(Exception):
    """Raised when a valid request does not fit on its sheet."""

    def __init__(self, report: PackingFailureReport) -> None:
        self.report = report
        super().__init__(report.message)


class PackingTimeoutError(Exception):
    """Raised when packing does not finish within the configured deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Packing did not finish within {timeout_seconds:g} seconds")


def _error_response(status_code: int, message: str, **extra: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message, **extra},
    )


def _format_request_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        # Drop the leading "body" segment pydantic adds for request bodies
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        path = ".".join(loc)
        messages.append(f"{path}: {error['msg']}" if path else error["msg"])
    return "; ".join(messages) or "Malformed request body"


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationFailedError)
    async def validation_failed_handler(
        request: Request, exc: RequestValidationFailedError
    ) -> JSONResponse:
        return _error_response(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_request_validation_error(exc)
        logger.info("Malformed cut request: %s", message)
        return _error_response(400, message)

    @app.exception_handler(PackingFailedError)
    async def packing_failed_handler(
        request: Request, exc: PackingFailedError
    ) -> JSONResponse:
        return _error_response(
            422,
            exc.report.message,
            unplacedElementIds=list(exc.report.unplaced_element_ids),
        )

    @app.exception_handler(CuttingSheetNotFoundError)
    async def not_found_handler(
        request: Request, exc: CuttingSheetNotFoundError
    ) -> JSONResponse:
        return _error_response(404, str(exc))

    @app.exception_handler(PackingTimeoutError)
    async def timeout_handler(
        request: Request, exc: PackingTimeoutError
    ) -> JSONResponse:
        logger.warning(str(exc))
        return _error_response(503, str(exc))
