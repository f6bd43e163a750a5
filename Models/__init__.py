# Models/__init__.py
from .base import Base
from .promo import Promo
from .product import Product
from .article import Article
from .comment import Comment
from .contact_message import ContactMessage
from .service_booking import ServiceBooking, BookingStatus

# List all models for easy access and database initialization
__all__ = [
    'Base',
    'Promo',
    'Product',
    'Article',
    'Comment',
    'ContactMessage',
    'ServiceBooking',
    'BookingStatus'
]
