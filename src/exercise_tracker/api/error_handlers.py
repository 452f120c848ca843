"""Exception handlers that turn failures into JSON error bodies.

Clients only ever see ``{"error": <message>}``; unexpected exceptions are
logged with their traceback and reported as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exercise_tracker.domain.errors import ExerciseTrackerError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(
        request: Request, exc: ExerciseTrackerError
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Store failure on %s: %s",
                request.url.path,
                exc.message,
                exc_info=exc,
            )
            return _error_response(exc.status_code, INTERNAL_ERROR_MESSAGE)
        logger.warning(
            "Rejected request on %s: %s",
            request.url.path,
            exc.message,
            extra={"status_code": exc.status_code},
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Invalid request on %s: %s", request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, "Bad request.")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s", request.url.path, exc_info=exc
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
