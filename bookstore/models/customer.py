"""
Customers table
"""
from sqlalchemy import Column, Integer, String, DateTime, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bookstore.core.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    # CustomerService.create always writes the starting points explicitly
    points = Column(Integer, nullable=False, server_default=text("100"))

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    orders = relationship("Order", back_populates="customer")
