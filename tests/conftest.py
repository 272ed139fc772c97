"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from label_lookup.config import Settings
from label_lookup.main import app as fastapi_app
from label_lookup.models.label import LabelInformation


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for Elasticsearch calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.post = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="0.0.0.0",
        api_port=8000,
        elasticsearch_url="http://es.test:9200/",
        label_index="labels-test",
        elasticsearch_timeout=3.0,
    )


@pytest.fixture
def basic_science_label():
    return LabelInformation(
        pretty_url_name="basic-science",
        id_string="basic_science",
        label="Basic Science",
    )


@pytest.fixture
def mock_query_service(basic_science_label):
    """Query service that resolves every name to the basic science label."""
    service = AsyncMock()
    service.get = AsyncMock(return_value=basic_science_label)
    return service


@pytest.fixture
def es_search_response():
    """Elasticsearch _search response with a single label hit."""
    return {
        "took": 2,
        "timed_out": False,
        "hits": {
            "total": {"value": 1, "relation": "eq"},
            "max_score": 1.0,
            "hits": [
                {
                    "_index": "labels-test",
                    "_id": "basic-science",
                    "_score": 1.0,
                    "_source": {
                        "pretty_url_name": "basic-science",
                        "id_string": "basic_science",
                        "label": "Basic Science",
                    },
                }
            ],
        },
    }


@pytest.fixture
def make_response():
    """Factory for real httpx.Response objects bound to a request so raise_for_status works."""

    def _make(status_code: int, json_data=None, text: str = "", method: str = "POST") -> httpx.Response:
        request = httpx.Request(method, "http://es.test:9200/labels-test/_search")
        if json_data is not None:
            return httpx.Response(status_code, json=json_data, request=request)
        return httpx.Response(status_code, text=text, request=request)

    return _make
