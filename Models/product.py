# Models/product.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime
from datetime import datetime
from .base import Base

class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, index=True)

    # Product details
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(precision=12, scale=2), nullable=False)
    image_url = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)

    # Inventory
    stock_quantity = Column(Integer, nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Product {self.name} ({self.category})>"
