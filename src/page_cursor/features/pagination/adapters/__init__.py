"""Adapters between raw API responses and pagination entities."""

from .list_response import PageInfo, ListResponse, cursor_from_response

__all__ = ["PageInfo", "ListResponse", "cursor_from_response"]
