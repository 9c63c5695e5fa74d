"""
Pytest fixtures and configuration for Bookstore Backend tests

This file provides shared fixtures that can be used across all test modules.
API and service tests run against in-memory repositories; repository tests
mock the database connection instead.
"""
import pytest
from datetime import datetime
from decimal import Decimal

from fastapi.testclient import TestClient

from bookstore.api.dependencies import get_book_service, get_customer_service, get_order_service
from bookstore.domain.book import Book
from bookstore.domain.customer import Customer
from bookstore.domain.order import Order
from bookstore.main import app
from bookstore.services.book_service import BookService
from bookstore.services.customer_service import CustomerService
from bookstore.services.order_service import OrderService


class InMemoryRepository:
    """
    Stand-in for CrudRepository keeping rows in a dict

    Same method surface as the real repositories, ids are assigned in
    insertion order.
    """

    def __init__(self, model):
        self.model = model
        self.rows = {}
        self._next_id = 1

    def find_all(self):
        return [self.rows[key] for key in sorted(self.rows)]

    def find_page(self, limit, offset):
        return self.find_all()[offset:offset + limit]

    def find_by_id(self, entity_id):
        return self.rows.get(entity_id)

    def exists(self, entity_id):
        return entity_id in self.rows

    def insert(self, values):
        now = datetime.now()
        entity = self.model(id=self._next_id, created_at=now, updated_at=now, **values)
        self.rows[entity.id] = entity
        self._next_id += 1
        return entity

    def update(self, entity_id, values):
        current = self.rows.get(entity_id)
        if current is None:
            return None
        updated = current.model_copy(update={**values, 'updated_at': datetime.now()})
        self.rows[entity_id] = updated
        return updated

    def delete(self, entity_id):
        return self.rows.pop(entity_id, None) is not None


@pytest.fixture
def book_repository():
    return InMemoryRepository(Book)


@pytest.fixture
def customer_repository():
    return InMemoryRepository(Customer)


@pytest.fixture
def order_repository():
    return InMemoryRepository(Order)


@pytest.fixture
def book_service(book_repository):
    return BookService(book_repository, page_size=10)


@pytest.fixture
def customer_service(customer_repository):
    return CustomerService(customer_repository)


@pytest.fixture
def order_service(order_repository, customer_repository, book_repository):
    return OrderService(order_repository, customers=customer_repository, books=book_repository)


@pytest.fixture
def client(book_service, customer_service, order_service):
    """
    Provides a TestClient with the services wired to in-memory repositories

    Overrides are removed after the test.
    """
    app.dependency_overrides[get_book_service] = lambda: book_service
    app.dependency_overrides[get_customer_service] = lambda: customer_service
    app.dependency_overrides[get_order_service] = lambda: order_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_book_data():
    """
    Provides sample book data for tests
    """
    return {
        "title": "Dune",
        "writer": "Frank Herbert",
        "cover_image_url": "https://example.com/dune.jpg",
        "price": 9.99,
        "tags": ["scifi", "classic"]
    }


@pytest.fixture
def sample_book_row():
    """
    Provides a books table row as returned by RealDictCursor
    """
    return {
        'id': 1,
        'title': 'Dune',
        'writer': 'Frank Herbert',
        'cover_image_url': 'https://example.com/dune.jpg',
        'price': Decimal('9.99'),
        'tags': ['scifi', 'classic'],
        'created_at': datetime.now(),
        'updated_at': datetime.now()
    }


@pytest.fixture
def stored_book(book_repository, sample_book_data):
    """A book already present in the in-memory store"""
    values = dict(sample_book_data, price=Decimal("9.99"))
    return book_repository.insert(values)


@pytest.fixture
def stored_customer(customer_repository):
    """A customer already present in the in-memory store"""
    return customer_repository.insert({"name": "Ada", "points": 100})
