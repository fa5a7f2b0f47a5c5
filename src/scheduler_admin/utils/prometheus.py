"""Prometheus metrics for the admin API."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import Gauge
from prometheus_fastapi_instrumentator import Instrumentator

__all__ = ["add_prometheus_metrics"]


REQUESTS_IN_PROGRESS = Gauge(
    "scheduler_admin_requests_in_progress",
    "Active HTTP requests",
    ["method", "path"],
)


def add_prometheus_metrics(app: FastAPI) -> None:
    """Expose default HTTP metrics on /metrics and track in-flight requests.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """
    Instrumentator().instrument(app).expose(app, include_in_schema=False)

    @app.middleware("http")
    async def track_in_flight(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Count requests between arrival and response."""
        gauge = REQUESTS_IN_PROGRESS.labels(request.method, request.url.path)
        gauge.inc()
        try:
            return await call_next(request)
        finally:
            gauge.dec()
