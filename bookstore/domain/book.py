"""
Book Domain Model

Represents a book in the bookstore catalog.
This is the single source of truth for book data structure.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from bookstore.domain.validation import (
    CoverImageUrl,
    PartialUpdate,
    Price,
    RequiredText,
    Tags,
)


class Book(BaseModel):
    """
    Book domain model - a row of the books table

    Fields:
        id: Internal book ID (primary key)
        title: Book title
        writer: Author name
        cover_image_url: URL of the cover image
        price: Price with 2 decimal digits
        tags: Ordered list of tags (may be empty)
        created_at: When the book was created
        updated_at: When the book was last updated
    """

    id: int = Field(..., description="Book ID")
    title: str = Field(..., description="Title of the book")
    writer: str = Field(..., description="Writer of the book")
    cover_image_url: str = Field(..., description="URL of the book cover image")
    price: Decimal = Field(..., description="Price of the book", ge=0)
    tags: List[str] = Field(default_factory=list, description="Tags associated with the book")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal price as float for JSON"""
        data = self.model_dump()
        data['price'] = float(data['price'])
        return data


class BookCreate(BaseModel):
    """Schema for creating a new book (all fields required)"""
    title: RequiredText
    writer: RequiredText
    cover_image_url: CoverImageUrl
    price: Price
    tags: Tags


class BookUpdate(PartialUpdate):
    """Schema for updating an existing book (any subset of fields)"""
    title: Optional[RequiredText] = None
    writer: Optional[RequiredText] = None
    cover_image_url: Optional[CoverImageUrl] = None
    price: Optional[Price] = None
    tags: Optional[Tags] = None
