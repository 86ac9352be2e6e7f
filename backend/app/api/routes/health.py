"""Operational endpoints: health checks and Prometheus metrics.

- /health is a liveness probe
- /healthz checks that the catalogue fixtures can be read
- /metrics exposes Prometheus metrics
"""

from typing import Any

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from backend.app.adapters.fixtures import fetch_tours, load_activities
from backend.app.config import Settings, get_settings

router = APIRouter()


async def check_catalogue(settings: Settings) -> tuple[bool, str]:
    """Check that tour and activity catalogues load.

    Returns:
        (is_ok, status_message)
    """
    try:
        tours = fetch_tours(settings.default_language).value
        activities = load_activities()
    except (OSError, ValueError) as e:
        return (False, f"error: {type(e).__name__}")

    if not tours or not activities:
        return (False, "empty")
    return (True, "ok")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | JSONResponse:
    """Health check endpoint.

    Returns:
        200 with component status if the catalogue is readable
        503 otherwise
    """
    settings = get_settings()
    catalogue_ok, catalogue_status = await check_catalogue(settings)

    response_body = {
        "status": "ok" if catalogue_ok else "degraded",
        "components": {"catalogue": catalogue_status},
    }

    if not catalogue_ok:
        return JSONResponse(content=response_body, status_code=503)

    return response_body


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics: schedule, trip plan, recommendation and catalogue counters."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
