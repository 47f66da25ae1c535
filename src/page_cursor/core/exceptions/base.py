"""Base exceptions for page-cursor.

All exceptions inherit from PageCursorError and carry an error code and
structured details for debugging and for error payloads.
"""

from typing import Any, Dict, Optional


class PageCursorError(Exception):
    """Base exception for all page-cursor errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: PageCursorError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The page-cursor exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
