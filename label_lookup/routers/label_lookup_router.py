"""Label lookup API routes."""

from fastapi import APIRouter, Depends, Query

from label_lookup.dependencies import get_label_lookup_handler
from label_lookup.exceptions import APIErrorException
from label_lookup.handlers.label_lookup_handler import LabelLookupHandler
from label_lookup.models.label import ApiError, LabelInformation

router = APIRouter()

LOOKUP_RESPONSES = {
    200: {
        "description": "Label record for the name",
        "content": {
            "application/json": {
                "example": {"prettyUrlName": "basic-science", "idString": "basic_science", "label": "Basic Science"}
            }
        },
    },
    400: {"description": "The name parameter is missing or blank"},
    500: {"description": "The label could not be retrieved"},
}


async def _lookup(handler: LabelLookupHandler, name: str | None) -> LabelInformation:
    result = await handler.get(name)
    if isinstance(result, ApiError):
        raise APIErrorException.from_api_error(result)
    return result


@router.get(
    "",
    response_model=LabelInformation,
    summary="Look up a label by name",
    description="""
    Resolves a pretty URL name (e.g. `basic-science`) to its label record.

    The `name` query parameter is required; a missing or blank name returns 400.
    """,
    responses=LOOKUP_RESPONSES,
)
async def get_label_by_query(
    name: str | None = Query(default=None, description="Pretty URL name to look up"),
    handler: LabelLookupHandler = Depends(get_label_lookup_handler),
):
    """Look up a label using the `name` query parameter."""
    return await _lookup(handler, name)


@router.get(
    "/{name}",
    response_model=LabelInformation,
    summary="Look up a label by name (path)",
    responses=LOOKUP_RESPONSES,
)
async def get_label(
    name: str,
    handler: LabelLookupHandler = Depends(get_label_lookup_handler),
):
    """Look up a label using the name in the path."""
    return await _lookup(handler, name)
