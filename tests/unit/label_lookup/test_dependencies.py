"""Tests for dependency injection functions."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient
from starlette.datastructures import State

from label_lookup.dependencies import get_http_client, get_label_lookup_handler, get_label_lookup_service
from label_lookup.handlers.label_lookup_handler import LabelLookupHandler


class TestDependencies:
    """Tests for dependency injection functions."""

    @pytest.mark.asyncio
    async def test_get_http_client(self):
        mock_request = MagicMock()
        mock_client = AsyncMock(spec=AsyncClient)
        mock_request.app.state.http_client = mock_client

        client = await get_http_client(mock_request)

        assert client == mock_client

    @pytest.mark.asyncio
    async def test_get_http_client_not_initialized(self):
        mock_request = MagicMock()
        mock_request.app.state = State()

        with pytest.raises(RuntimeError):
            await get_http_client(mock_request)

    @pytest.mark.asyncio
    async def test_get_label_lookup_service(self, mock_query_service):
        mock_request = MagicMock()
        mock_request.app.state.label_lookup_service = mock_query_service

        service = await get_label_lookup_service(mock_request)

        assert service is mock_query_service

    @pytest.mark.asyncio
    async def test_get_label_lookup_service_not_initialized(self):
        mock_request = MagicMock()
        mock_request.app.state = State()

        with pytest.raises(RuntimeError, match="Label lookup service not initialized"):
            await get_label_lookup_service(mock_request)

    @pytest.mark.asyncio
    async def test_get_label_lookup_handler(self, mock_query_service):
        handler = await get_label_lookup_handler(mock_query_service)

        assert isinstance(handler, LabelLookupHandler)
        assert handler.query_service is mock_query_service
        assert handler.logger.name == "label_lookup.handlers.label_lookup_handler"
