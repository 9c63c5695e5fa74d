"""
List views over the Bookstore API

Each view owns its own fetch, loading and error state and renders a plain
text list. Views are independent of each other.

State machine per view:
    LOADING -> LOADED    rows fetched
    LOADING -> ERRORED   fetch failed; no further automatic fetches

BookListView adds infinite scroll: reaching the bottom of the document
fetches the next page and appends it, one page fetch at a time.
"""
import asyncio
import logging
from enum import Enum
from typing import Any, List, Optional

from bookstore.client.api_client import BookstoreClient, BookstoreClientError
from bookstore.client.pagination import PaginationDriver, is_near_bottom
from bookstore.domain.book import Book
from bookstore.domain.customer import Customer
from bookstore.domain.order import Order

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class ListView:
    """
    Base list view: one fetch on mount, then render

    Subclasses set title/resource and implement fetch() and render_row().
    The current fetch runs as an asyncio.Task so it can be cancelled.
    """

    title: str = ""
    resource: str = ""

    def __init__(self, client: BookstoreClient):
        self.client = client
        self.state = ViewState.LOADING
        self.error: Optional[BookstoreClientError] = None
        self._rows: List[Any] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def rows(self) -> List[Any]:
        return self._rows

    async def fetch(self) -> List[Any]:
        raise NotImplementedError

    def render_row(self, row: Any) -> str:
        raise NotImplementedError

    async def mount(self) -> None:
        """Issue the initial fetch and wait for it"""
        await self._start(self._load())

    def unmount(self) -> None:
        """Cancel the fetch in flight, if any; its result is discarded"""
        if self._task is not None and not self._task.done():
            logger.debug(f"{self.title} view unmounted, cancelling fetch")
            self._task.cancel()

    def _start(self, coro) -> asyncio.Task:
        self._task = asyncio.create_task(coro)
        return self._task

    async def _load(self) -> None:
        try:
            rows = await self.fetch()
        except BookstoreClientError as e:
            self._fail(e)
            return
        self._rows = list(rows)
        self.state = ViewState.LOADED

    def _fail(self, error: BookstoreClientError) -> None:
        logger.warning(f"Failed to fetch {self.resource}: {error}")
        self.error = error
        self.state = ViewState.ERRORED

    def render(self) -> str:
        if self.state is ViewState.LOADING:
            return "Loading..."

        if self.state is ViewState.ERRORED:
            return f"Error: Failed to fetch {self.resource}. Please try again later."

        blocks = [self.title]
        blocks.extend(self.render_row(row) for row in self.rows)
        return "\n\n".join(blocks)


class BookListView(ListView):
    """
    Books, fetched page by page

    The first page is fetched on mount; every scroll signal that reaches the
    bottom of the document requests the next page, unless a page is still
    loading, the end of the list was reached, or the view has errored.
    """

    title = "Books"
    resource = "books"

    def __init__(self, client: BookstoreClient, scroll_threshold: float = 0):
        super().__init__(client)
        self.scroll_threshold = scroll_threshold
        self.pagination: PaginationDriver[Book] = PaginationDriver()

    @property
    def rows(self) -> List[Book]:
        return self.pagination.items

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more

    async def _load(self) -> None:
        page = self.pagination.begin_next()
        if page is None:
            return

        try:
            rows = await self.client.list_books(page=page)
        except BookstoreClientError as e:
            self.pagination.fail(page)
            self._fail(e)
            return
        except asyncio.CancelledError:
            self.pagination.abandon(page)
            raise

        self.pagination.complete(page, rows)
        self.state = ViewState.LOADED

    def load_more(self) -> Optional[asyncio.Task]:
        """
        Request the next page

        Returns:
            The task fetching the page, or None if no fetch was started
        """
        if self.state is ViewState.ERRORED or not self.pagination.can_advance:
            return None
        return self._start(self._load())

    def on_scroll(self, viewport_height: float, scroll_top: float, document_height: float) -> Optional[asyncio.Task]:
        """Scroll listener: load the next page once the bottom is reached"""
        if not is_near_bottom(viewport_height, scroll_top, document_height, self.scroll_threshold):
            return None
        return self.load_more()

    def render_row(self, book: Book) -> str:
        return "\n".join([
            f"Title: {book.title}",
            f"Writer: {book.writer}",
            f"Price: ${book.price:.2f}",
            f"Tags: {', '.join(book.tags)}",
        ])

    def render(self) -> str:
        text = super().render()
        if self.state is ViewState.LOADED and not self.has_more:
            text += "\n\nNo more books to fetch"
        return text


class CustomerListView(ListView):
    title = "Customers"
    resource = "customers"

    async def fetch(self) -> List[Customer]:
        return await self.client.list_customers()

    def render_row(self, customer: Customer) -> str:
        return f"Name: {customer.name}\nPoints: {customer.points}"


class OrderListView(ListView):
    title = "Orders"
    resource = "orders"

    async def fetch(self) -> List[Order]:
        return await self.client.list_orders()

    def render_row(self, order: Order) -> str:
        return f"Customer ID: {order.customer_id}\nBook ID: {order.book_id}"
