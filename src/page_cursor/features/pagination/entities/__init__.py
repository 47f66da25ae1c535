"""Pagination entities."""

from .page_cursor import PageCursor

__all__ = ["PageCursor"]
