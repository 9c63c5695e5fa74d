"""Bookstore API client.

Async client for the books, customers and orders endpoints.

Usage:
    from bookstore.client import BookstoreClient

    async with BookstoreClient("http://localhost:8000") as client:
        books = await client.list_books(page=1)
        customer = await client.create_customer(name="Ada")
"""
import logging
from decimal import Decimal
from typing import Any, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bookstore.client.config import ClientSettings
from bookstore.domain.book import Book, BookCreate, BookUpdate
from bookstore.domain.customer import Customer, CustomerCreate, CustomerUpdate
from bookstore.domain.order import Order, OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BookstoreClientError(Exception):
    """Any failed request: transport error, non-2xx status or unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class BookstoreClient:
    """Async client for the Bookstore API.

    Attributes:
        base_url: Base URL of the API (BOOKSTORE_API_URL when not given)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the API
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        settings = ClientSettings()
        self.base_url = (base_url or settings.BOOKSTORE_API_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.BOOKSTORE_API_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "BookstoreClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Make an API request and return the decoded JSON body."""
        try:
            response = await self._client.request(method=method, url=path, json=json, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise BookstoreClientError(f"Request to {path} failed: {e}")

        if response.status_code >= 400:
            try:
                details = response.json()
            except ValueError:
                details = None
            message = details.get("detail") if isinstance(details, dict) else None
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise BookstoreClientError(
                message=str(message or response.text or response.reason_phrase),
                status_code=response.status_code,
                details=details,
            )

        try:
            return response.json()
        except ValueError:
            raise BookstoreClientError(
                f"Response from {path} is not JSON",
                status_code=response.status_code,
            )

    @staticmethod
    def _parse(model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise BookstoreClientError(f"Unexpected {model.__name__} payload: {e}", details=data)

    def _parse_list(self, model: Type[ModelT], data: Any) -> List[ModelT]:
        if not isinstance(data, list):
            raise BookstoreClientError(f"Expected a list of {model.__name__}", details=data)
        return [self._parse(model, item) for item in data]

    # Books
    async def list_books(self, page: int = 1) -> List[Book]:
        """Get one page of books (empty once past the last page)."""
        data = await self._request("GET", "/books", params={"page": page})
        return self._parse_list(Book, data)

    async def get_book(self, book_id: int) -> Book:
        data = await self._request("GET", f"/books/{book_id}")
        return self._parse(Book, data)

    async def create_book(
        self,
        title: str,
        writer: str,
        cover_image_url: str,
        price: Decimal,
        tags: List[str],
    ) -> Book:
        payload = BookCreate(
            title=title,
            writer=writer,
            cover_image_url=cover_image_url,
            price=price,
            tags=tags,
        )
        data = await self._request("POST", "/books", json=payload.model_dump(mode="json"))
        return self._parse(Book, data["book"])

    async def update_book(self, book_id: int, **changes: Any) -> Book:
        payload = BookUpdate(**changes)
        data = await self._request(
            "PUT",
            f"/books/{book_id}",
            json=payload.model_dump(mode="json", exclude_unset=True),
        )
        return self._parse(Book, data["book"])

    async def delete_book(self, book_id: int) -> str:
        data = await self._request("DELETE", f"/books/{book_id}")
        return data["message"]

    # Customers
    async def list_customers(self) -> List[Customer]:
        data = await self._request("GET", "/customers")
        return self._parse_list(Customer, data)

    async def get_customer(self, customer_id: int) -> Customer:
        data = await self._request("GET", f"/customers/{customer_id}")
        return self._parse(Customer, data)

    async def create_customer(self, name: str) -> Customer:
        payload = CustomerCreate(name=name)
        data = await self._request("POST", "/customers", json=payload.model_dump(mode="json"))
        return self._parse(Customer, data["customer"])

    async def update_customer(self, customer_id: int, **changes: Any) -> Customer:
        payload = CustomerUpdate(**changes)
        data = await self._request(
            "PUT",
            f"/customers/{customer_id}",
            json=payload.model_dump(mode="json", exclude_unset=True),
        )
        return self._parse(Customer, data["customer"])

    async def delete_customer(self, customer_id: int) -> str:
        data = await self._request("DELETE", f"/customers/{customer_id}")
        return data["message"]

    # Orders
    async def list_orders(self) -> List[Order]:
        data = await self._request("GET", "/orders")
        return self._parse_list(Order, data)

    async def get_order(self, order_id: int) -> Order:
        data = await self._request("GET", f"/orders/{order_id}")
        return self._parse(Order, data)

    async def place_order(self, customer_id: int, book_id: int) -> Order:
        payload = OrderCreate(customer_id=customer_id, book_id=book_id)
        data = await self._request("POST", "/orders", json=payload.model_dump(mode="json"))
        return self._parse(Order, data["order"])

    async def update_order(self, order_id: int, **changes: Any) -> Order:
        payload = OrderUpdate(**changes)
        data = await self._request(
            "PUT",
            f"/orders/{order_id}",
            json=payload.model_dump(mode="json", exclude_unset=True),
        )
        return self._parse(Order, data["order"])

    async def delete_order(self, order_id: int) -> str:
        data = await self._request("DELETE", f"/orders/{order_id}")
        return data["message"]

