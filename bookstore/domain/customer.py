"""
Customer Domain Model
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from bookstore.domain.validation import PartialUpdate, Points, RequiredText

# Every new customer starts with this balance, whatever the request says
NEW_CUSTOMER_POINTS = 100


class Customer(BaseModel):
    """Customer domain model - a row of the customers table"""

    id: int = Field(..., description="Customer ID")
    name: str = Field(..., description="Name of the customer")
    points: int = Field(NEW_CUSTOMER_POINTS, description="Points of the customer")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump()


class CustomerCreate(BaseModel):
    """
    Schema for creating a new customer

    Only the name is accepted; any other key in the request body (points
    included) is ignored.
    """
    name: RequiredText


class CustomerUpdate(PartialUpdate):
    """Schema for updating an existing customer"""
    name: Optional[RequiredText] = None
    points: Optional[Points] = None
