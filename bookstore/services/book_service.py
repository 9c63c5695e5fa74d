"""
Book Service
"""
from typing import List, Optional

from bookstore.core.config import settings
from bookstore.domain.book import Book
from bookstore.repositories.book_repository import BookRepository
from bookstore.services.resource_service import ResourceService


class BookService(ResourceService[Book]):
    """CRUD for books plus page-bounded listing"""

    entity_name = "Book"

    def __init__(self, repository: BookRepository, page_size: Optional[int] = None):
        super().__init__(repository)
        self.page_size = page_size or settings.BOOKS_PAGE_SIZE

    def list_page(self, page: int = 1) -> List[Book]:
        """
        Get one page of books in storage order

        Args:
            page: 1-indexed page number

        Returns:
            At most page_size books; empty once past the last page
        """
        if page < 1:
            raise ValueError("page must be a positive integer")

        offset = (page - 1) * self.page_size
        return self.repository.find_page(limit=self.page_size, offset=offset)
