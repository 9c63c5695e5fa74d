"""
Bookstore App - the three list views under one heading
"""
import asyncio
import logging
from typing import List

from bookstore.client.api_client import BookstoreClient
from bookstore.client.views import BookListView, CustomerListView, ListView, OrderListView

logger = logging.getLogger(__name__)

APP_HEADING = "Bookstore App"


class BookstoreApp:
    """Mounts the book, customer and order views side by side"""

    def __init__(self, client: BookstoreClient, scroll_threshold: float = 0):
        self.client = client
        self.books = BookListView(client, scroll_threshold=scroll_threshold)
        self.customers = CustomerListView(client)
        self.orders = OrderListView(client)

    @property
    def views(self) -> List[ListView]:
        return [self.books, self.customers, self.orders]

    async def mount(self) -> None:
        """Mount every view concurrently; one failing view does not affect the others"""
        await asyncio.gather(*(view.mount() for view in self.views))
        logger.info(
            "Views mounted: "
            + ", ".join(f"{view.resource}={view.state.value}" for view in self.views)
        )

    def unmount(self) -> None:
        for view in self.views:
            view.unmount()

    def render(self) -> str:
        return "\n\n".join([APP_HEADING] + [view.render() for view in self.views])
