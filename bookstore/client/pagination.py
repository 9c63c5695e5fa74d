"""
Infinite-scroll pagination state

PaginationDriver only keeps state: the last requested page, whether more
pages are expected, whether a page fetch is in flight, and the rows
accumulated so far. The book list view performs the fetches and reports
the outcome back here.

Page fetches are serialized: a new page can only be requested once the
previous one has completed, failed or been abandoned.
"""
import logging
from typing import Generic, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")


def is_near_bottom(viewport_height: float, scroll_top: float, document_height: float, threshold: float = 0) -> bool:
    """True when the viewport has reached the bottom of the document (within threshold px)"""
    return viewport_height + scroll_top >= document_height - threshold


class PaginationDriver(Generic[RowT]):
    """
    Page counter + hasMore flag for one paginated list

    Attributes:
        page: Last page requested (0 before the first request)
        has_more: False once an empty page came back
        in_flight: Page currently being fetched, or None
        items: Rows of every completed page, in page order
    """

    def __init__(self):
        self.page = 0
        self.has_more = True
        self.in_flight: Optional[int] = None
        self.items: List[RowT] = []

    @property
    def can_advance(self) -> bool:
        return self.has_more and self.in_flight is None

    def begin_next(self) -> Optional[int]:
        """
        Advance the page counter and mark that page as in flight

        Returns:
            The page number to fetch, or None when no fetch should start
            (no more pages, or another page is still in flight)
        """
        if not self.has_more:
            logger.debug("No more pages, ignoring request")
            return None
        if self.in_flight is not None:
            logger.debug(f"Page {self.in_flight} still loading, ignoring request")
            return None

        self.page += 1
        self.in_flight = self.page
        return self.page

    def complete(self, page: int, rows: Sequence[RowT]) -> None:
        """Append a fetched page; an empty page ends pagination"""
        self._release(page)
        if not rows:
            self.has_more = False
            logger.info(f"Page {page} is empty, end of list reached")
            return
        self.items.extend(rows)

    def fail(self, page: int) -> None:
        """The fetch for page failed; the page stays consumed"""
        self._release(page)

    def abandon(self, page: int) -> None:
        """The fetch for page was cancelled; the page can be requested again"""
        self._release(page)
        if self.page == page:
            self.page -= 1

    def _release(self, page: int) -> None:
        if self.in_flight != page:
            raise RuntimeError(f"Page {page} is not in flight (in flight: {self.in_flight})")
        self.in_flight = None
