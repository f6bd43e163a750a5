# Services/comment_router.py
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, EmailStr, conint, constr
from typing import List
from datetime import datetime
import logging
from Models import Article, Comment
from database import get_db
from Services.common import MAX_ID

logger = logging.getLogger(__name__)

router = APIRouter(
    responses={404: {"description": "Article not found"}}
)

class CommentCreate(BaseModel):
    article_id: conint(ge=1, le=MAX_ID)
    author_name: constr(min_length=1)
    author_email: EmailStr
    content: constr(min_length=1)

class CommentResponse(BaseModel):
    id: int
    article_id: int
    author_name: str
    author_email: str
    content: str
    is_approved: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

def list_approved_comments(db: Session, article_id: int) -> List[Comment]:
    """Approved comments of one article, oldest first. Unknown articles simply have none."""
    return (
        db.query(Comment)
        .filter(Comment.article_id == article_id, Comment.is_approved == True)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )

@router.post("",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a comment",
    description="New comments are stored unapproved and stay hidden until moderated."
)
async def create_comment(
    comment: CommentCreate,
    db: Session = Depends(get_db)
):
    article = db.query(Article.id).filter(Article.id == comment.article_id).first()
    if not article:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Article with id {comment.article_id} not found"
        )

    db_comment = Comment(**comment.model_dump(), is_approved=False)
    db.add(db_comment)
    try:
        db.commit()
        db.refresh(db_comment)
        return db_comment
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error("Comment creation failed", exc_info=True)
        raise
