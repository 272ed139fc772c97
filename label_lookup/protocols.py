"""Protocol definitions for dependency injection."""

from typing import Protocol

from label_lookup.models.label import LabelInformation


class LabelLookupQueryService(Protocol):
    """Protocol for services that resolve a name to a label record.

    The lookup handler depends only on this interface, so the backing store
    (Elasticsearch, a fixture, a mock) can be swapped freely.
    """

    async def get(self, name: str) -> LabelInformation:
        """Look up the label record for a pretty URL name.

        Args:
            name: Pretty URL name to resolve

        Returns:
            The matching label record

        Raises:
            Exception: Any failure to resolve the name
        """
        ...
