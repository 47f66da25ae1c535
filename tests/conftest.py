"""Pytest configuration and fixtures for page-cursor tests."""

from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from page_cursor import PageCursor, Ok, Err, UpstreamFetchError


class InMemoryListing:
    """A listing of pages served by an AsyncMock fetcher.

    ``failures`` maps page indexes to the error returned when that page is
    fetched.
    """

    def __init__(self, pages: List[Any], failures: Optional[Dict[int, Any]] = None):
        self.pages = pages
        self.failures = failures or {}
        self.fetcher = AsyncMock(side_effect=self._fetch)

    @staticmethod
    def token_for(index: int) -> str:
        return f"CAUQAA-{index}"

    async def _fetch(self, token: str):
        index = int(token.rsplit("-", 1)[1])
        if index in self.failures:
            return Err(self.failures[index])
        return Ok(self.cursor(index))

    def cursor(self, index: int) -> PageCursor:
        return PageCursor(
            data=self.pages[index],
            fetch_page=self.fetcher,
            results_per_page=len(self.pages[index]),
            total_results=sum(len(page) for page in self.pages),
            prev_token=self.token_for(index - 1) if index > 0 else None,
            next_token=self.token_for(index + 1) if index < len(self.pages) - 1 else None,
        )

    @property
    def fetched_indexes(self) -> List[int]:
        return [int(call.args[0].rsplit("-", 1)[1]) for call in self.fetcher.call_args_list]


@pytest.fixture
def make_listing() -> Callable[..., InMemoryListing]:
    """Factory for in-memory listings."""
    return InMemoryListing


@pytest.fixture
def five_pages() -> List[List[str]]:
    """Five pages of playlist ids."""
    return [[f"PL{page}{item}" for item in range(3)] for page in range(5)]


@pytest.fixture
def upstream_error() -> UpstreamFetchError:
    """Sample upstream failure."""
    return UpstreamFetchError("quotaExceeded", token="CAUQAA-1", status_code=403)


@pytest.fixture
def unused_fetcher() -> AsyncMock:
    """Fetcher that should never be awaited."""
    return AsyncMock()
