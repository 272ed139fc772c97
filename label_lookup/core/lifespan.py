"""Application lifespan management."""

import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from label_lookup import __version__
from label_lookup.config import Settings, get_settings
from label_lookup.logging_config import get_logger, log_with_context
from label_lookup.middleware.logging_middleware import redact_sensitive_data
from label_lookup.services.label_lookup_service import ElasticsearchLabelLookupService

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outbound requests with redacted credentials."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted credentials."""
    await response.aread()
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the pooled HTTP client used to talk to Elasticsearch."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=5.0,
            read=settings.elasticsearch_timeout,
            write=5.0,
            pool=5.0,
        ),
        limits=httpx.Limits(
            max_keepalive_connections=10,
            max_connections=20,
            keepalive_expiry=30.0,
        ),
        headers={"Content-Type": "application/json"},
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup still runs.
    """
    settings = get_settings()
    app.state.startup_time = time.time()
    app.state.request_count = 0

    log_with_context(
        logger,
        "info",
        "Starting Label Lookup API",
        version=__version__,
        elasticsearch_url=redact_sensitive_data(settings.elasticsearch_url),
        label_index=settings.label_index,
        event_type="app_startup",
    )

    client = create_http_client(settings)
    app.state.http_client = client
    app.state.label_lookup_service = ElasticsearchLabelLookupService(client, settings)
    log_with_context(
        logger,
        "info",
        "Label lookup service initialized",
        event_type="label_lookup_service_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Label Lookup API",
            event_type="app_shutdown",
        )
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
