"""Health endpoints."""

import time
from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from label_lookup import __version__
from label_lookup.dependencies import get_http_client, get_label_lookup_service
from label_lookup.models import DetailedHealthResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    For dependency status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    query_service=Depends(get_label_lookup_service),
):
    """Readiness probe - can the application serve lookups?

    **Returns:**
    - 200: the Elasticsearch cluster is green or yellow
    - 503: a dependency is unavailable

    Also reports uptime and the number of requests served since startup.
    """
    checks: dict[str, str] = {}
    all_healthy = True

    checks["http_client"] = "ok"

    ping = getattr(query_service, "ping", None)
    if ping is None:
        checks["elasticsearch"] = "not_applicable"
    else:
        try:
            cluster_status = await ping()
            checks["elasticsearch"] = "ok" if cluster_status in ("green", "yellow") else f"status: {cluster_status}"
            if cluster_status not in ("green", "yellow"):
                all_healthy = False
        except Exception as e:
            checks["elasticsearch"] = f"failed: {str(e)[:50]}"
            all_healthy = False

    status_code = 200 if all_healthy else 503
    status = "healthy" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=status_code,
        content=DetailedHealthResponse(
            status=status,
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
            uptime_seconds=int(time.time() - request.app.state.startup_time),
            total_requests=request.app.state.request_count,
        ).model_dump(mode="json"),
    )
