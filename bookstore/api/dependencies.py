"""
FastAPI dependencies for the resource services

Routes receive their service through Depends() so tests can swap the
repositories with app.dependency_overrides.
"""
from bookstore.repositories import BookRepository, CustomerRepository, OrderRepository
from bookstore.services.book_service import BookService
from bookstore.services.customer_service import CustomerService
from bookstore.services.order_service import OrderService


def get_book_service() -> BookService:
    """
    FastAPI dependency providing the book service

    Usage:
        @router.get("")
        def list_books(service: BookService = Depends(get_book_service)):
            ...
    """
    return BookService(BookRepository())


def get_customer_service() -> CustomerService:
    return CustomerService(CustomerRepository())


def get_order_service() -> OrderService:
    return OrderService(
        OrderRepository(),
        customers=CustomerRepository(),
        books=BookRepository(),
    )
