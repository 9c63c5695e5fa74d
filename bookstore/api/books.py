"""
Books API Endpoints
Handles the book catalog

Endpoints:
- GET    /books?page=N     - One page of books (empty past the last page)
- POST   /books            - Create a book
- GET    /books/{book_id}  - Get one book
- PUT    /books/{book_id}  - Partial update
- DELETE /books/{book_id}  - Delete a book
"""
from fastapi import APIRouter, Depends, Query

from bookstore.api.dependencies import get_book_service
from bookstore.api.errors import service_errors
from bookstore.domain.book import BookCreate, BookUpdate
from bookstore.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("")
def list_books(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    service: BookService = Depends(get_book_service)
):
    """
    Get one page of books

    Page size is fixed server-side (BOOKS_PAGE_SIZE). No totals are returned;
    an empty list means there are no more books.
    """
    with service_errors("fetching books"):
        books = service.list_page(page)
        return [book.to_dict() for book in books]


@router.post("", status_code=201)
def create_book(payload: BookCreate, service: BookService = Depends(get_book_service)):
    with service_errors("creating book"):
        book = service.create(payload)
        return {"message": "Book created successfully", "book": book.to_dict()}


@router.get("/{book_id}")
def get_book(book_id: int, service: BookService = Depends(get_book_service)):
    with service_errors("fetching book"):
        return service.get(book_id).to_dict()


@router.put("/{book_id}")
def update_book(
    book_id: int,
    payload: BookUpdate,
    service: BookService = Depends(get_book_service)
):
    """Update only the supplied fields; omitted fields keep their values"""
    with service_errors("updating book"):
        book = service.update(book_id, payload)
        return {"message": "Book updated successfully", "book": book.to_dict()}


@router.delete("/{book_id}")
def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    with service_errors("deleting book"):
        service.delete(book_id)
        return {"message": "Book deleted successfully"}
