"""Exception hierarchy for page-cursor."""

from .base import PageCursorError, create_error_response
from .pagination import (
    ConstructionInvariantViolation,
    UnwrapError,
    UpstreamFetchError,
)

__all__ = [
    "PageCursorError",
    "create_error_response",
    "ConstructionInvariantViolation",
    "UnwrapError",
    "UpstreamFetchError",
]
