"""Protocol for the capability that turns a page token into a page."""

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from ....core.value_objects import Outcome

if TYPE_CHECKING:
    from ..entities.page_cursor import PageCursor

T = TypeVar('T')


@runtime_checkable
class PageFetcher(Protocol[T]):
    """Async callable bound into every cursor of one listing.

    Implementations are supplied by the request layer. They must report
    expected failures (network errors, invalid tokens, authorization
    failures) as ``Err`` outcomes and return cursors that carry an
    equivalent fetcher for the following hops.
    """

    async def __call__(self, token: str) -> 'Outcome[PageCursor[T], Any]':
        """Fetch the page identified by an opaque continuation token.

        Args:
            token: Token previously issued as a previous/next page token

        Returns:
            ``Ok`` with the new cursor, or ``Err`` with the upstream error
        """
        ...
