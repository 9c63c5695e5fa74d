"""
Order Repository - Data Access Layer for Orders
"""
from bookstore.domain.order import Order
from bookstore.repositories.base import CrudRepository


class OrderRepository(CrudRepository[Order]):
    """Repository for the orders table"""

    table = "orders"
    columns = ("customer_id", "book_id")
    model = Order
