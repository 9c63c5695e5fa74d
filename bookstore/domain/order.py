"""
Order Domain Model

An order links one customer to one book. The referenced ids are checked
when the order is written (see OrderService), not afterwards.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from bookstore.domain.validation import PartialUpdate


class Order(BaseModel):
    """Order domain model - a row of the orders table"""

    id: int = Field(..., description="Order ID")
    customer_id: int = Field(..., description="ID of the customer")
    book_id: int = Field(..., description="ID of the book")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump()


class OrderCreate(BaseModel):
    """Schema for placing a new order"""
    customer_id: int
    book_id: int


class OrderUpdate(PartialUpdate):
    """Schema for updating an existing order"""
    customer_id: Optional[int] = None
    book_id: Optional[int] = None
