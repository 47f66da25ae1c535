"""A single page of a token-paginated listing with lazy navigation."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Generic, List, Optional, TypeVar

from ....config.constants import LIKELY_BUG
from ....config.settings import get_settings
from ....core.exceptions import ConstructionInvariantViolation
from ....core.value_objects import Ok, Outcome
from ..protocols import PageFetcher

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _hop_level() -> int:
    return logging.INFO if get_settings().trace_navigation else logging.DEBUG


@dataclass(frozen=True)
class PageCursor(Generic[T]):
    """One page of results plus the tokens needed to reach its neighbours.

    Navigation never mutates a cursor: ``previous()`` and ``next()`` fetch
    and return a new one. Nothing is cached, so every call costs one
    request (and whatever quota the remote service charges for it).
    """

    data: T
    fetch_page: PageFetcher[T] = field(repr=False, compare=False)
    results_per_page: Optional[int] = None
    # May be larger than what is actually retrievable
    total_results: Optional[int] = None
    prev_token: Optional[str] = None
    next_token: Optional[str] = None

    def __post_init__(self):
        """Validate mandatory pagination metadata."""
        missing = [
            name for name in ("results_per_page", "total_results")
            if getattr(self, name) is None
        ]
        if missing:
            logger.debug(f"{' and '.join(missing)} not provided")
            logger.debug(
                "results_per_page and total_results are expected to be "
                "included in the API response"
            )
            raise ConstructionInvariantViolation(LIKELY_BUG, missing_fields=missing)

        # Empty tokens mean the same as no token
        if not self.prev_token:
            object.__setattr__(self, "prev_token", None)
        if not self.next_token:
            object.__setattr__(self, "next_token", None)

    @property
    def has_previous(self) -> bool:
        """Check if there is a previous page."""
        return self.prev_token is not None

    @property
    def has_next(self) -> bool:
        """Check if there is a next page."""
        return self.next_token is not None

    @property
    def page_info(self) -> Dict[str, Any]:
        """Get pagination information for this page."""
        return {
            "results_per_page": self.results_per_page,
            "total_results": self.total_results,
            "has_previous": self.has_previous,
            "has_next": self.has_next,
            "prev_token": self.prev_token,
            "next_token": self.next_token,
        }

    async def previous(self) -> Optional[Outcome['PageCursor[T]', Any]]:
        """Fetch the previous page.

        Returns:
            The fetch outcome, unchanged, or None when this is the first page
        """
        if self.prev_token is None:
            logger.log(_hop_level(), "No previous page token, skipping fetch")
            return None
        logger.log(_hop_level(), "Fetching previous page")
        return await self.fetch_page(self.prev_token)

    async def next(self) -> Optional[Outcome['PageCursor[T]', Any]]:
        """Fetch the next page.

        Returns:
            The fetch outcome, unchanged, or None when this is the last page
        """
        if self.next_token is None:
            logger.log(_hop_level(), "No next page token, skipping fetch")
            return None
        logger.log(_hop_level(), "Fetching next page")
        return await self.fetch_page(self.next_token)

    async def all(self) -> Outcome[List[T], Any]:
        """Fetch every page of the listing and collect their data.

        Walks backward to the first page, then forward from this page to
        the last one, one request at a time. The first failed fetch ends
        the walk and is returned as the result; pages collected so far are
        dropped.

        Each page's ``data`` is one entry of the result, so a listing of
        item lists comes back as a list of lists (see ``flatten_pages``).
        """
        pages: Deque[T] = deque([self.data])
        logger.debug(
            f"Collecting all pages (has_previous={self.has_previous}, "
            f"has_next={self.has_next})"
        )

        outcome = await self.previous()
        while outcome is not None:
            if outcome.is_err():
                logger.debug(f"Backward fetch failed after {len(pages)} page(s)")
                return outcome
            cursor = outcome.value
            pages.appendleft(cursor.data)
            outcome = await cursor.previous()

        outcome = await self.next()
        while outcome is not None:
            if outcome.is_err():
                logger.debug(f"Forward fetch failed after {len(pages)} page(s)")
                return outcome
            cursor = outcome.value
            pages.append(cursor.data)
            outcome = await cursor.next()

        logger.debug(f"Collected {len(pages)} page(s)")
        return Ok(list(pages))
