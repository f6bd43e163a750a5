# Models/article.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime
from .base import Base

class Article(Base):
    __tablename__ = 'articles'

    id = Column(Integer, primary_key=True, index=True)

    # Content
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    category = Column(String, nullable=False)
    author = Column(String, nullable=False)

    # Counters, only ever incremented in place
    like_count = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)

    is_published = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<Article {self.title} by {self.author}>"
