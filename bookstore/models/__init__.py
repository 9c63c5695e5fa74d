"""
Database models (schema declaration)
"""
from .book import Book
from .customer import Customer
from .order import Order

__all__ = [
    "Book",
    "Customer",
    "Order",
]
