# Models/comment.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from datetime import datetime
from .base import Base

class Comment(Base):
    __tablename__ = 'comments'

    id = Column(Integer, primary_key=True, index=True)

    # Owning article. Existence is checked when the comment is written,
    # there is no database-level foreign key.
    article_id = Column(Integer, nullable=False, index=True)

    author_name = Column(String, nullable=False)
    author_email = Column(String, nullable=False)
    content = Column(Text, nullable=False)

    # Moderation
    is_approved = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<Comment #{self.id} on article {self.article_id}>"
