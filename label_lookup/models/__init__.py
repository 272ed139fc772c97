"""Label Lookup API models"""

from label_lookup.models.base_models import DetailedHealthResponse, HealthResponse
from label_lookup.models.label import ApiError, LabelInformation, LookupResult

__all__ = [
    "ApiError",
    "DetailedHealthResponse",
    "HealthResponse",
    "LabelInformation",
    "LookupResult",
]
