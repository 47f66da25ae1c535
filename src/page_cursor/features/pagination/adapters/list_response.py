"""Build cursors from the standard list-response envelope.

Token-paginated listing APIs (the YouTube Data API among them) answer
list calls with a body shaped like::

    {
        "items": [...],
        "pageInfo": {"resultsPerPage": 5, "totalResults": 42},
        "prevPageToken": "...",
        "nextPageToken": "..."
    }

The request layer validates that body with ``ListResponse`` and hands it
to ``cursor_from_response`` together with its fetcher.
"""

from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..entities import PageCursor
from ..protocols import PageFetcher

T = TypeVar('T')


class PageInfo(BaseModel):
    """Pagination counters reported by the server."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Left optional so that PageCursor reports the contract violation itself
    results_per_page: Optional[int] = Field(default=None, alias="resultsPerPage")
    total_results: Optional[int] = Field(default=None, alias="totalResults")


class ListResponse(BaseModel):
    """List-response envelope around one page of items."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: List[Any] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")
    prev_page_token: Optional[str] = Field(default=None, alias="prevPageToken")
    next_page_token: Optional[str] = Field(default=None, alias="nextPageToken")


def cursor_from_response(
    payload: Mapping[str, Any],
    fetch_page: PageFetcher[T],
    parse_items: Optional[Callable[[List[Any]], T]] = None,
) -> PageCursor[T]:
    """Validate a list response and wrap it in a ``PageCursor``.

    Args:
        payload: Decoded JSON body of the list call
        fetch_page: Fetcher bound into the cursor for later hops
        parse_items: Converts raw items into the page data; defaults to
            keeping the raw item list

    Returns:
        Cursor for the page described by ``payload``

    Raises:
        pydantic.ValidationError: If the envelope has the wrong shape
        ConstructionInvariantViolation: If ``pageInfo`` counters are missing
    """
    response = ListResponse.model_validate(payload)
    data = parse_items(response.items) if parse_items else response.items
    return PageCursor(
        data=data,
        fetch_page=fetch_page,
        results_per_page=response.page_info.results_per_page,
        total_results=response.page_info.total_results,
        prev_token=response.prev_page_token,
        next_token=response.next_page_token,
    )
