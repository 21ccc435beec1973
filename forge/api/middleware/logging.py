"""
Request/Response logging middleware.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response

from forge.config.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)
from forge.config.settings import settings
from forge.infrastructure.monitoring.metrics import (
    API_REQUEST_DURATION,
    API_REQUESTS,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _endpoint(request: Request) -> str:
    # Route template, e.g. /jobs/{job_id}/quote
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


def _record_metrics(request: Request, status_code: int, elapsed: float) -> None:
    endpoint = _endpoint(request)
    API_REQUESTS.labels(
        method=request.method, endpoint=endpoint, status_code=str(status_code)
    ).inc()
    API_REQUEST_DURATION.labels(method=request.method, endpoint=endpoint).observe(
        elapsed
    )


class LoggingMiddleware:
    """Logs every request, tags it with a request id and records API metrics."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        """Register the HTTP middleware on the application."""

        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
            request.state.request_id = request_id
            bind_request_context(
                request_id=request_id, method=request.method, path=request.url.path
            )
            start_time = time.perf_counter()

            logger.info(
                "Request started",
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    error=str(e),
                    process_time=f"{time.perf_counter() - start_time:.4f}s",
                )
                clear_request_context()
                raise

            elapsed = time.perf_counter() - start_time
            logger.info(
                "Request completed",
                status_code=response.status_code,
                process_time=f"{elapsed:.4f}s",
            )
            if settings.ENABLE_METRICS:
                _record_metrics(request, response.status_code, elapsed)

            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            clear_request_context()

            return response
