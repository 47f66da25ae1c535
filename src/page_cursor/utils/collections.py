"""Helpers for working with collected pages."""

from typing import Iterable, List, TypeVar

T = TypeVar('T')


def flatten_pages(pages: Iterable[Iterable[T]]) -> List[T]:
    """Flatten per-page item collections into a single list, keeping order."""
    return [item for page in pages for item in page]
