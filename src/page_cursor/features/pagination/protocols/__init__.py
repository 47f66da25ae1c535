"""Pagination protocols."""

from .fetcher import PageFetcher

__all__ = ["PageFetcher"]
