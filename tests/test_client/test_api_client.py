"""Unit tests for the async Bookstore API client."""

import json

import httpx
import pytest

from bookstore.client.api_client import BookstoreClient, BookstoreClientError


def book_row(book_id: int, title: str = "Dune") -> dict:
    return {
        "id": book_id,
        "title": title,
        "writer": "Frank Herbert",
        "cover_image_url": "https://example.com/dune.jpg",
        "price": 9.99,
        "tags": ["scifi"],
        "created_at": None,
        "updated_at": None,
    }


def make_client(handler) -> BookstoreClient:
    return BookstoreClient("http://bookstore.test", transport=httpx.MockTransport(handler))


class TestBooks:
    """Tests for the book endpoints."""

    @pytest.mark.asyncio
    async def test_list_books_sends_page(self) -> None:
        """Requests the given page and parses every row."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[book_row(11), book_row(12)])

        async with make_client(handler) as client:
            books = await client.list_books(page=2)

        assert [b.id for b in books] == [11, 12]
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/books"
        assert seen[0].url.params["page"] == "2"

    @pytest.mark.asyncio
    async def test_create_book_posts_json(self) -> None:
        """Sends every field and returns the created book."""
        sent = {}

        def handler(request: httpx.Request) -> httpx.Response:
            sent.update(json.loads(request.content))
            return httpx.Response(201, json={"message": "Book created successfully", "book": book_row(1)})

        async with make_client(handler) as client:
            book = await client.create_book(
                title="Dune",
                writer="Frank Herbert",
                cover_image_url="https://example.com/dune.jpg",
                price="9.99",
                tags=["scifi"],
            )

        assert book.id == 1
        assert sent["title"] == "Dune"
        assert sent["tags"] == ["scifi"]

    @pytest.mark.asyncio
    async def test_update_book_sends_only_changes(self) -> None:
        """Partial update body holds only the supplied fields."""
        sent = {}

        def handler(request: httpx.Request) -> httpx.Response:
            sent.update(json.loads(request.content))
            return httpx.Response(200, json={"message": "Book updated successfully", "book": book_row(1)})

        async with make_client(handler) as client:
            await client.update_book(1, title="Emma")

        assert sent == {"title": "Emma"}

    @pytest.mark.asyncio
    async def test_not_found_raises_client_error(self) -> None:
        """Non-2xx responses carry status and detail."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "Book 42 not found"})

        async with make_client(handler) as client:
            with pytest.raises(BookstoreClientError) as exc:
                await client.get_book(42)

        assert exc.value.status_code == 404
        assert exc.value.message == "Book 42 not found"


class TestFailures:
    """Tests for transport and payload failures."""

    @pytest.mark.asyncio
    async def test_transport_error_raises_client_error(self) -> None:
        """Connection failures surface as BookstoreClientError without status."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(BookstoreClientError) as exc:
                await client.list_customers()

        assert exc.value.status_code is None

    @pytest.mark.asyncio
    async def test_unexpected_payload_raises_client_error(self) -> None:
        """A list endpoint answering with an object is rejected."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": []})

        async with make_client(handler) as client:
            with pytest.raises(BookstoreClientError):
                await client.list_orders()

    @pytest.mark.asyncio
    async def test_non_json_body_raises_client_error(self) -> None:
        """A 2xx response that is not JSON is rejected."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        async with make_client(handler) as client:
            with pytest.raises(BookstoreClientError):
                await client.list_customers()


class TestCustomersAndOrders:
    """Tests for the customer and order endpoints."""

    @pytest.mark.asyncio
    async def test_create_customer_sends_name_only(self) -> None:
        """Customer creation body carries just the name."""
        sent = {}

        def handler(request: httpx.Request) -> httpx.Response:
            sent.update(json.loads(request.content))
            customer = {"id": 3, "name": "Ada", "points": 100}
            return httpx.Response(201, json={"message": "Customer created successfully", "customer": customer})

        async with make_client(handler) as client:
            customer = await client.create_customer(name="Ada")

        assert sent == {"name": "Ada"}
        assert customer.points == 100

    @pytest.mark.asyncio
    async def test_place_order_validation_error(self) -> None:
        """422 responses keep the field-level detail."""
        detail = [{"loc": ["body", "customer_id"], "msg": "The selected customer id is invalid.", "type": "value_error"}]

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"detail": detail})

        async with make_client(handler) as client:
            with pytest.raises(BookstoreClientError) as exc:
                await client.place_order(customer_id=999, book_id=1)

        assert exc.value.status_code == 422
        assert exc.value.details == {"detail": detail}

    @pytest.mark.asyncio
    async def test_delete_order_returns_message(self) -> None:
        """Delete returns the server message."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            return httpx.Response(200, json={"message": "Order deleted successfully"})

        async with make_client(handler) as client:
            assert await client.delete_order(5) == "Order deleted successfully"
