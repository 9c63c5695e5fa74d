"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities and the
request models used to create and update them.
"""
from bookstore.domain.book import Book, BookCreate, BookUpdate
from bookstore.domain.customer import Customer, CustomerCreate, CustomerUpdate, NEW_CUSTOMER_POINTS
from bookstore.domain.order import Order, OrderCreate, OrderUpdate

__all__ = [
    'Book', 'BookCreate', 'BookUpdate',
    'Customer', 'CustomerCreate', 'CustomerUpdate', 'NEW_CUSTOMER_POINTS',
    'Order', 'OrderCreate', 'OrderUpdate',
]
