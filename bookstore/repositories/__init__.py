"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.
"""
from bookstore.repositories.base import CrudRepository
from bookstore.repositories.book_repository import BookRepository
from bookstore.repositories.customer_repository import CustomerRepository
from bookstore.repositories.order_repository import OrderRepository

__all__ = [
    'CrudRepository',
    'BookRepository',
    'CustomerRepository',
    'OrderRepository',
]
