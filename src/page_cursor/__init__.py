"""page-cursor - lazy bidirectional pagination for token-paginated APIs.

Wraps one page of a listing together with its continuation tokens and
lets callers step to neighbouring pages or collect the whole listing
without handling tokens themselves.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    PageCursorSettings,
    get_settings,
    reload_settings,
    get_logger,
    LIKELY_BUG,
)

from .core.exceptions import (
    PageCursorError,
    ConstructionInvariantViolation,
    UnwrapError,
    UpstreamFetchError,
    create_error_response,
)

from .core.value_objects import Ok, Err, Outcome, ok, err

from .features.pagination import (
    PageCursor,
    PageFetcher,
    PageInfo,
    ListResponse,
    cursor_from_response,
)

from .utils import flatten_pages

__all__ = [
    "__version__",

    # Configuration
    "PageCursorSettings",
    "get_settings",
    "reload_settings",
    "get_logger",
    "setup_logging",
    "LIKELY_BUG",

    # Exceptions
    "PageCursorError",
    "ConstructionInvariantViolation",
    "UnwrapError",
    "UpstreamFetchError",
    "create_error_response",

    # Outcome
    "Ok",
    "Err",
    "Outcome",
    "ok",
    "err",

    # Pagination
    "PageCursor",
    "PageFetcher",
    "PageInfo",
    "ListResponse",
    "cursor_from_response",

    # Utilities
    "flatten_pages",
]
