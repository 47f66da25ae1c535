"""Pagination errors."""

from typing import Any, Optional, Sequence

from .base import PageCursorError


class ConstructionInvariantViolation(PageCursorError):
    """Raised when a page is built without its mandatory pagination metadata.

    The request layer promised ``results_per_page`` and ``total_results``
    for every page. Their absence is a contract violation, not something
    callers are expected to recover from.
    """

    def __init__(
        self,
        message: str,
        missing_fields: Sequence[str] = (),
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.details["missing_fields"] = list(missing_fields)


class UnwrapError(PageCursorError):
    """Raised when unwrapping the wrong variant of an outcome."""

    def __init__(self, message: str, payload: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.details["payload"] = payload


class UpstreamFetchError(PageCursorError):
    """Failure reported by the layer that fetches pages.

    Fetchers return these inside ``Err`` rather than raising them. The
    cursor never inspects them.
    """

    def __init__(
        self,
        message: str = "Failed to fetch page",
        token: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.token = token
        self.status_code = status_code
        if token is not None:
            self.details["token"] = token
        if status_code is not None:
            self.details["status_code"] = status_code
