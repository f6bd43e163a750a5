# Services/promo_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, constr, confloat
from typing import List, Optional
from datetime import datetime
import logging
from Models import Promo
from database import get_db
from Services.common import Number, UrlStr, UtcDatetime, to_decimal

logger = logging.getLogger(__name__)

router = APIRouter()

class PromoBase(BaseModel):
    """
    Base promo schema with common attributes.

    Attributes:
        title: Headline shown on the promo banner
        description: Optional longer text
        image_url: Absolute URL of the banner image
        start_date: Start of the promo period
        end_date: End of the promo period
        is_active: Whether the promo is currently shown
    """
    title: constr(min_length=1)
    description: Optional[str] = None
    image_url: UrlStr
    start_date: UtcDatetime
    end_date: UtcDatetime
    is_active: bool = True

class PromoCreate(PromoBase):
    """Schema for creating a new promo."""
    discount_percentage: Optional[confloat(ge=0, le=100, allow_inf_nan=False)] = None

class PromoResponse(PromoBase):
    """
    Schema for promo responses.

    The discount is stored as an exact decimal and returned as a number.
    """
    id: int
    discount_percentage: Optional[Number] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

@router.get("",
    response_model=List[PromoResponse],
    summary="List all promos",
    description="Active promos first, newest first within each group."
)
async def list_promos(db: Session = Depends(get_db)):
    return (
        db.query(Promo)
        .order_by(Promo.is_active.desc(), Promo.created_at.desc())
        .all()
    )

@router.post("",
    response_model=PromoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new promo"
)
async def create_promo(
    promo: PromoCreate,
    db: Session = Depends(get_db)
):
    data = promo.model_dump()
    data["discount_percentage"] = to_decimal(promo.discount_percentage)
    db_promo = Promo(**data)
    db.add(db_promo)
    try:
        db.commit()
        db.refresh(db_promo)
        return db_promo
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error("Promo creation failed", exc_info=True)
        raise
