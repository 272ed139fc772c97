"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Depends, Request

from label_lookup.handlers.label_lookup_handler import LabelLookupHandler
from label_lookup.logging_config import get_logger
from label_lookup.protocols import LabelLookupQueryService

handler_logger = get_logger("label_lookup.handlers.label_lookup_handler")


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared AsyncClient instance.

    Raises:
        RuntimeError: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise RuntimeError("HTTP client not initialized. This should never happen.")

    return client


async def get_label_lookup_service(request: Request) -> LabelLookupQueryService:
    """
    Get the label lookup query service from app state.

    Raises:
        RuntimeError: If the query service is not initialized.
    """
    service: LabelLookupQueryService | None = getattr(request.app.state, "label_lookup_service", None)

    if service is None:
        raise RuntimeError("Label lookup service not initialized.")

    return service


async def get_label_lookup_handler(
    query_service: LabelLookupQueryService = Depends(get_label_lookup_service),
) -> LabelLookupHandler:
    """Build a lookup handler around the injected query service."""
    return LabelLookupHandler(query_service, handler_logger)
