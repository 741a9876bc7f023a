"""
Cursor-driven page iteration for Gong listing methods
"""

from typing import Any, AsyncIterator, Awaitable, Callable, Optional

from ..core.logging import get_logger
from ..models.schemas import PaginatedResponse

logger = get_logger(__name__)


async def iter_pages(
    fetch_page: Callable[..., Awaitable[PaginatedResponse]],
    max_pages: Optional[int] = None,
    **params: Any,
) -> AsyncIterator[PaginatedResponse]:
    """
    Walk a listing method page by page.

    The cursor each page returns is handed back to ``fetch_page`` verbatim;
    iteration stops on the first page without one. Pages are fetched one at
    a time, only when the consumer asks for the next.

    Example:
        async for page in iter_pages(client.list_calls, from_date_time=since):
            for call in page.records:
                ...

    Args:
        fetch_page: A listing method such as ``GongClient.list_calls``
        max_pages: Stop after this many pages even if more exist
        **params: Filters passed unchanged to every call

    Yields:
        Each PaginatedResponse in upstream order
    """
    if "cursor" in params:
        raise TypeError("iter_pages manages the cursor; pass filters only")

    cursor: Optional[str] = None
    pages = 0

    while True:
        page = await fetch_page(cursor=cursor, **params)
        pages += 1
        yield page

        if not page.cursor:
            return
        if max_pages is not None and pages >= max_pages:
            logger.debug(f"Stopping pagination after {pages} pages with more available")
            return
        cursor = page.cursor
