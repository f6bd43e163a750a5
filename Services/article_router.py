# Services/article_router.py
from fastapi import APIRouter, HTTPException, Depends, Path, status
from sqlalchemy import exc, update
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, constr
from typing import List, Optional
from datetime import datetime
import logging
from Models import Article
from database import get_db
from Services.common import MAX_ID, UrlStr
from Services.comment_router import CommentResponse, list_approved_comments

logger = logging.getLogger(__name__)

router = APIRouter(
    responses={404: {"description": "Article not found"}}
)

class ArticleBase(BaseModel):
    """
    Base article schema with common attributes.

    Attributes:
        title: Article headline
        content: Full article body
        excerpt: Optional teaser shown in listings
        image_url: Optional absolute URL of the cover image
        category: Free-form category name
        author: Display name of the author
        is_published: Unpublished articles are never listed
    """
    title: constr(min_length=1)
    content: constr(min_length=1)
    excerpt: Optional[str] = None
    image_url: Optional[UrlStr] = None
    category: constr(min_length=1)
    author: constr(min_length=1)
    is_published: bool = True

class ArticleCreate(ArticleBase):
    """Schema for creating a new article. Counters always start at zero."""
    pass

class ArticleResponse(ArticleBase):
    """Schema for article responses, including the like and view counters."""
    id: int
    like_count: int
    view_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

def increment_counter(db: Session, article_id: int, values: dict) -> Optional[Article]:
    """
    Apply a single UPDATE ... RETURNING to one article and return the updated row.

    The increment is evaluated by the database (col = col + 1) and the row comes
    back from the same statement, so concurrent calls neither lose updates nor
    see each other's results. Returns None when the article does not exist.
    """
    stmt = (
        update(Article)
        .where(Article.id == article_id)
        .values(values)
        .returning(Article)
    )
    try:
        article = db.scalars(stmt).first()
        if article is not None:
            # Keep the returned values; commit would expire them
            db.expunge(article)
        db.commit()
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error(f"Counter update failed for article {article_id}", exc_info=True)
        raise

    return article

@router.get("",
    response_model=List[ArticleResponse],
    summary="List published articles",
    description="Only published articles are returned, newest first."
)
async def list_articles(db: Session = Depends(get_db)):
    return (
        db.query(Article)
        .filter(Article.is_published == True)
        .order_by(Article.created_at.desc(), Article.id.desc())
        .all()
    )

@router.get("/{article_id}",
    response_model=ArticleResponse,
    summary="Read an article",
    description="Every read counts as one view. The returned view_count includes this read."
)
async def get_article(
    article_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db)
):
    article = increment_counter(db, article_id, {Article.view_count: Article.view_count + 1})
    if not article:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )
    return article

@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    article: ArticleCreate,
    db: Session = Depends(get_db)
):
    db_article = Article(**article.model_dump(), like_count=0, view_count=0)
    db.add(db_article)
    try:
        db.commit()
        db.refresh(db_article)
        return db_article
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error("Article creation failed", exc_info=True)
        raise

@router.post("/{article_id}/like", response_model=ArticleResponse)
async def like_article(
    article_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db)
):
    article = increment_counter(db, article_id, {
        Article.like_count: Article.like_count + 1,
        Article.updated_at: datetime.utcnow()
    })
    if not article:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )
    return article

@router.get("/{article_id}/comments",
    response_model=List[CommentResponse],
    summary="List approved comments of an article",
    description="Oldest first. An unknown article id yields an empty list."
)
async def list_article_comments(
    article_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db)
):
    return list_approved_comments(db, article_id)
