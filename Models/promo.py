# Models/promo.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime
from datetime import datetime
from .base import Base

class Promo(Base):
    __tablename__ = 'promos'

    id = Column(Integer, primary_key=True, index=True)

    # Content
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=False)

    # Exact decimal, converted to a number at the API boundary
    discount_percentage = Column(Numeric(precision=5, scale=2), nullable=True)

    # Validity window
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Promo {self.title} ({self.discount_percentage}%)>"
