"""Pydantic models for label records and lookup results."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from label_lookup.exceptions import ErrorCode

INVALID_NAME_MESSAGE = "You must specify the name parameter."
INTERNAL_FAILURE_MESSAGE = "Errors occured."


class LabelInformation(BaseModel):
    """A label record: the pretty URL name, its internal ID and display text.

    Serialized with camelCase keys (prettyUrlName, idString, label). Accepts
    either camelCase or the snake_case field names stored in the index.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    pretty_url_name: str = Field(..., description="URL-safe slug, e.g. 'basic-science'")
    id_string: str = Field(..., description="Internal identifier, e.g. 'basic_science'")
    label: str = Field(..., description="Display text, e.g. 'Basic Science'")


class ApiError(BaseModel):
    """Error envelope returned to API consumers: a message and an HTTP status code."""

    model_config = ConfigDict(frozen=True)

    message: str
    http_status_code: int
    code: ErrorCode

    @classmethod
    def invalid_input(cls) -> "ApiError":
        """Missing, empty or whitespace-only name."""
        return cls(message=INVALID_NAME_MESSAGE, http_status_code=400, code=ErrorCode.INVALID_INPUT)

    @classmethod
    def internal_failure(cls) -> "ApiError":
        """Any query service failure. Carries no detail about the cause."""
        return cls(message=INTERNAL_FAILURE_MESSAGE, http_status_code=500, code=ErrorCode.INTERNAL_FAILURE)


LookupResult = LabelInformation | ApiError
