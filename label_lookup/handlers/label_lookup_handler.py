"""Validates label lookup requests and translates query service outcomes."""

import logging

from label_lookup.logging_config import get_logger, log_with_context
from label_lookup.models.label import ApiError, LookupResult
from label_lookup.protocols import LabelLookupQueryService


class LabelLookupHandler:
    """Resolve a name to a label record through a query service.

    Returns either the LabelInformation from the service or an ApiError:
    400 for a missing or blank name (the service is not called), 500 for any
    service failure. Failure detail goes to the log, never into the result.
    """

    def __init__(self, query_service: LabelLookupQueryService, logger: logging.Logger | None = None):
        self._query_service = query_service
        self._logger = logger or get_logger(__name__)

    @property
    def query_service(self) -> LabelLookupQueryService:
        return self._query_service

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    async def get(self, name: str | None) -> LookupResult:
        """Look up the label for a pretty URL name.

        Args:
            name: Pretty URL name, passed to the query service unmodified

        Returns:
            LabelInformation on success, otherwise an ApiError
        """
        if name is None or not name.strip():
            log_with_context(
                self._logger,
                "info",
                "Rejected label lookup with missing name",
                event_type="label_lookup_invalid_name",
            )
            return ApiError.invalid_input()

        try:
            return await self._query_service.get(name)
        except Exception as e:
            log_with_context(
                self._logger,
                "error",
                "Label lookup failed",
                label_name=name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="label_lookup_failed",
            )
            return ApiError.internal_failure()
