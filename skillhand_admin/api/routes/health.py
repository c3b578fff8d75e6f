"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from skillhand_admin.api.dependencies import TransportDep
from skillhand_admin.config.logging import get_logger
from skillhand_admin.config.settings import settings
from skillhand_admin.domain.exceptions.api_error import ApiClientError
from skillhand_admin.infrastructure.backend.service_request_client import (
    SERVICE_REQUESTS_PATH,
)
from skillhand_admin.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check for Kubernetes."""
    return {"status": "alive", "timestamp": _now()}


@router.get("/ready")
async def readiness_check(transport: TransportDep) -> Dict[str, Any]:
    """Ready once the marketplace backend answers."""
    try:
        await transport.get(SERVICE_REQUESTS_PATH, params={"page": 1, "limit": 1})
    except ApiClientError as e:
        logger.warning("Readiness check failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Backend unavailable: {e}",
        )

    return {"status": "ready", "backend": settings.API_BASE_URL, "timestamp": _now()}


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Metrics are disabled"
        )

    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
