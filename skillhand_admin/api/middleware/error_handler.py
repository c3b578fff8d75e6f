"""
Error handling for the admin API.
"""

import traceback

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from skillhand_admin.config.logging import get_logger
from skillhand_admin.domain.exceptions.api_error import (
    ApiClientError,
    HttpStatusError,
    RequestCancelledError,
)
from skillhand_admin.domain.exceptions.validation_error import (
    InvalidStatusTransitionError,
    RecordNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)

# Client closed request
STATUS_CLIENT_CLOSED_REQUEST = 499


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation Error",
                "message": str(exc),
                "type": "validation_error",
            },
        )

    @app.exception_handler(InvalidStatusTransitionError)
    async def transition_error_handler(
        request: Request, exc: InvalidStatusTransitionError
    ):
        logger.warning(
            "Invalid status transition",
            record_id=exc.record_id,
            current_status=exc.current_status,
            target_status=exc.target_status,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=409,
            content={
                "error": "Invalid Status Transition",
                "message": str(exc),
                "type": "invalid_transition",
            },
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"error": "Not Found", "message": str(exc), "type": "not_found"},
        )

    @app.exception_handler(ApiClientError)
    async def backend_error_handler(request: Request, exc: ApiClientError):
        logger.error("Backend error", error=str(exc), path=request.url.path)
        content = {
            "error": "Backend Error",
            "message": str(exc),
            "type": "backend_error",
        }
        if isinstance(exc, HttpStatusError):
            content["details"] = {"status_code": exc.status_code}
        return JSONResponse(status_code=502, content=content)

    @app.exception_handler(RequestCancelledError)
    async def cancelled_handler(request: Request, exc: RequestCancelledError):
        logger.info("Request cancelled", path=request.url.path)
        return Response(status_code=STATUS_CLIENT_CLOSED_REQUEST)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "HTTP Error",
                "message": exc.detail,
                "type": "http_error",
            },
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
                "type": "internal_error",
            },
        )
