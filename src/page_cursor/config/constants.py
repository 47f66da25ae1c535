"""Constants shared across page-cursor."""

from typing import Final


LIKELY_BUG: Final[str] = (
    "This is likely a bug in page-cursor or in the request layer that built "
    "this page. Please report it together with the debug log output."
)


class LoggerNames:
    """Logger names used by the package."""

    ROOT: Final[str] = "page_cursor"


class EnvPrefix:
    """Environment variable prefixes."""

    SETTINGS: Final[str] = "PAGE_CURSOR_"
