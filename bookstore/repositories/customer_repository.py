"""
Customer Repository - Data Access Layer for Customers
"""
from bookstore.domain.customer import Customer
from bookstore.repositories.base import CrudRepository


class CustomerRepository(CrudRepository[Customer]):
    """Repository for the customers table"""

    table = "customers"
    columns = ("name", "points")
    model = Customer
