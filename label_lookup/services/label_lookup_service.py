"""Elasticsearch-backed label lookup over the REST API."""

import httpx
from pydantic import ValidationError

from label_lookup.config import Settings, get_settings
from label_lookup.exceptions import LabelNotFoundException, LookupServiceException, SearchBackendException
from label_lookup.logging_config import get_logger, log_with_context
from label_lookup.models.label import LabelInformation

logger = get_logger(__name__)


class ElasticsearchLabelLookupService:
    """Resolve pretty URL names against the label index.

    Uses the shared, connection-pooled HTTP client created at startup.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings | None = None):
        self._client = client
        self._settings = settings or get_settings()

    @property
    def index_url(self) -> str:
        return f"{self._settings.elasticsearch_url}/{self._settings.label_index}"

    async def get(self, name: str) -> LabelInformation:
        """Find the label record whose pretty_url_name matches exactly.

        Args:
            name: Pretty URL name to resolve

        Returns:
            The first matching LabelInformation

        Raises:
            LabelNotFoundException: If no document matches
            SearchBackendException: If Elasticsearch returns an error status
            LookupServiceException: On network errors or malformed responses
        """
        query = {"size": 1, "query": {"term": {"pretty_url_name": name}}}

        try:
            response = await self._client.post(
                f"{self.index_url}/_search",
                json=query,
                timeout=self._settings.elasticsearch_timeout,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise SearchBackendException(
                f"Label search failed (HTTP {e.response.status_code})",
                status_code=e.response.status_code,
                details={"api_response": e.response.text, "index": self._settings.label_index},
            ) from e
        except httpx.HTTPError as e:
            raise LookupServiceException(
                f"Failed to reach Elasticsearch: {str(e)}",
                details={"error_type": "network_error"},
            ) from e
        except ValueError as e:
            raise LookupServiceException(
                f"Invalid JSON from Elasticsearch: {str(e)}",
                details={"error_type": "parsing_error"},
            ) from e

        try:
            hits = data["hits"]["hits"]
        except (KeyError, TypeError) as e:
            raise LookupServiceException(
                "Unexpected search response shape",
                details={"error_type": "parsing_error"},
            ) from e

        if not hits:
            log_with_context(
                logger,
                "info",
                "No label matched name",
                label_name=name,
                index=self._settings.label_index,
                event_type="label_not_found",
            )
            raise LabelNotFoundException(name, details={"index": self._settings.label_index})

        try:
            return LabelInformation.model_validate(hits[0]["_source"])
        except (KeyError, TypeError, ValidationError) as e:
            raise LookupServiceException(
                f"Failed to process label document: {str(e)}",
                details={"error_type": "parsing_error"},
            ) from e

    async def ping(self) -> str:
        """Return the cluster health status (green, yellow or red).

        Raises:
            SearchBackendException: If the health request fails
        """
        try:
            response = await self._client.get(f"{self._settings.elasticsearch_url}/_cluster/health", timeout=2.0)
            response.raise_for_status()
            return str(response.json()["status"])
        except httpx.HTTPStatusError as e:
            raise SearchBackendException(
                f"Cluster health check failed (HTTP {e.response.status_code})",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            raise SearchBackendException(f"Cluster health check failed: {str(e)}", status_code=503) from e
