"""
Request logging middleware.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response

from skillhand_admin.config.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware:
    """Log one event per API call and tag backend calls with the request id."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
            request.state.request_id = request_id
            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(
                request_id=request_id,
                method=request.method,
                path=request.url.path,
            )
            started = time.perf_counter()

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "API call failed",
                    error=str(e),
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )
                raise
            finally:
                elapsed = time.perf_counter() - started

            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "API call",
                status_code=response.status_code,
                duration_ms=round(elapsed * 1000, 2),
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            return response
