"""
Bookstore client: API client and list views
"""
from bookstore.client.api_client import BookstoreClient, BookstoreClientError
from bookstore.client.app import BookstoreApp
from bookstore.client.pagination import PaginationDriver, is_near_bottom
from bookstore.client.views import (
    BookListView,
    CustomerListView,
    ListView,
    OrderListView,
    ViewState,
)

__all__ = [
    "BookstoreClient",
    "BookstoreClientError",
    "BookstoreApp",
    "PaginationDriver",
    "is_near_bottom",
    "ListView",
    "BookListView",
    "CustomerListView",
    "OrderListView",
    "ViewState",
]
