"""
Error handling middleware.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from forge.api.schemas.common import ErrorResponse
from forge.config.logging import get_logger
from forge.domain.exceptions.access_error import ForbiddenError, UnauthorizedError
from forge.domain.exceptions.base import ForgeError
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.domain.exceptions.state_error import InvalidStateError
from forge.domain.exceptions.validation_error import ValidationError
from forge.infrastructure.monitoring.metrics import ERRORS_TOTAL

logger = get_logger(__name__)

# Most specific first; the first matching class wins
ERROR_RESPONSES = [
    (ValidationError, 400, "Validation Error"),
    (InvalidStateError, 400, "Invalid State"),
    (UnauthorizedError, 401, "Unauthorized"),
    (ForbiddenError, 403, "Forbidden"),
    (NotFoundError, 404, "Not Found"),
    (ConflictError, 409, "Conflict"),
]


def error_body(title: str, message: str, error_type: str) -> dict:
    return ErrorResponse(error=title, message=message, type=error_type).model_dump()


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ForgeError)
    async def domain_error_handler(request: Request, exc: ForgeError):
        status_code, title = 500, "Internal Server Error"
        for error_class, code, error_title in ERROR_RESPONSES:
            if isinstance(exc, error_class):
                status_code, title = code, error_title
                break

        logger.warning(
            "Request rejected",
            error=str(exc),
            reason=exc.reason,
            status_code=status_code,
            path=request.url.path,
        )
        ERRORS_TOTAL.labels(error_type=exc.reason, component="api").inc()
        return JSONResponse(
            status_code=status_code,
            content=error_body(title, exc.message, exc.reason),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = first.get("msg", "Invalid request")
        if location:
            message = f"{location}: {message}"

        logger.warning(
            "Request validation failed", error=message, path=request.url.path
        )
        return JSONResponse(
            status_code=400,
            content=error_body("Validation Error", message, "validation_error"),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Database error", error=str(exc), path=request.url.path, exc_info=exc
        )
        ERRORS_TOTAL.labels(error_type="database_error", component="api").inc()
        return JSONResponse(
            status_code=500,
            content=error_body(
                "Internal Server Error", "A database error occurred", "internal_error"
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        error_type = "internal_error" if exc.status_code >= 500 else "http_error"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("HTTP Error", str(exc.detail), error_type),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            exc_info=exc,
        )
        ERRORS_TOTAL.labels(error_type=type(exc).__name__, component="api").inc()
        return JSONResponse(
            status_code=500,
            content=error_body(
                "Internal Server Error",
                "An unexpected error occurred",
                "internal_error",
            ),
        )
