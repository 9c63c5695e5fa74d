"""
Book Repository - Data Access Layer for Books

Handles all database queries for books and returns Book domain models.
"""
from typing import Any

from psycopg2.extras import Json

from bookstore.domain.book import Book
from bookstore.repositories.base import CrudRepository


class BookRepository(CrudRepository[Book]):
    """Repository for the books table"""

    table = "books"
    columns = ("title", "writer", "cover_image_url", "price", "tags")
    model = Book

    def _adapt_value(self, column: str, value: Any) -> Any:
        # tags is a json column; keep list order as sent
        if column == "tags":
            return Json(list(value))
        return value

    def _map_row(self, row: dict) -> Book:
        data = dict(row)
        # json columns come back already decoded; NULL only on legacy rows
        data['tags'] = data.get('tags') or []
        return Book(**data)
