"""
Books table
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bookstore.core.database import Base


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    writer = Column(String(255), nullable=False)
    cover_image_url = Column(String(255), nullable=False)
    price = Column(Numeric(8, 2), nullable=False)
    # Ordered list of strings
    tags = Column(JSON, nullable=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    orders = relationship("Order", back_populates="book")
