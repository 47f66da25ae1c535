"""Utility helpers."""

from .collections import flatten_pages

__all__ = ["flatten_pages"]
