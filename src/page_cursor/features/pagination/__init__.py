"""Lazy bidirectional pagination over token-paginated listings.

This module provides:
- PageCursor: one page plus previous/next navigation and ``all()``
- PageFetcher: protocol for the capability the request layer injects
- List-response adapter that builds cursors from API response bodies
"""

from .entities import PageCursor
from .protocols import PageFetcher
from .adapters import PageInfo, ListResponse, cursor_from_response

__all__ = [
    "PageCursor",
    "PageFetcher",
    "PageInfo",
    "ListResponse",
    "cursor_from_response",
]
