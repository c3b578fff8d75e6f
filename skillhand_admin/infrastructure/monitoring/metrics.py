"""
Prometheus metrics for backend calls and query caching.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Kept apart from the process-wide default registry
registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the registry holding the application metrics."""
    return registry


BACKEND_REQUESTS = Counter(
    "backend_requests_total",
    "Total number of requests sent to the marketplace backend",
    ["method", "endpoint", "status"],
    registry=registry,
)

BACKEND_REQUEST_DURATION = Histogram(
    "backend_request_duration_seconds",
    "Time spent waiting for the marketplace backend",
    ["method", "endpoint"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=registry,
)

QUERY_CACHE_EVENTS = Counter(
    "query_cache_events_total",
    "Query cache hits, misses and invalidations",
    ["event"],
    registry=registry,
)


def record_backend_request(
    method: str, endpoint: str, status: str, duration_seconds: float
) -> None:
    """Record one backend call.

    status is the HTTP status code as a string, or a failure kind such as
    'network_error' or 'cancelled' when no response was received.
    """
    BACKEND_REQUESTS.labels(method=method, endpoint=endpoint, status=status).inc()
    BACKEND_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(
        duration_seconds
    )


def record_cache_event(event: str, amount: int = 1) -> None:
    """Record a query cache event (hit, miss, invalidated)."""
    QUERY_CACHE_EVENTS.labels(event=event).inc(amount)


def get_metrics() -> bytes:
    """Get metrics in Prometheus text format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    """Get Prometheus metrics content type."""
    return CONTENT_TYPE_LATEST
