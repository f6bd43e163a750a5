# Services/product_router.py
from fastapi import APIRouter, HTTPException, Depends, Path, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, constr, confloat, conint
from typing import List, Optional
from datetime import datetime
import logging
from Models import Product
from database import get_db
from Services.common import MAX_ID, Number, UrlStr, to_decimal

logger = logging.getLogger(__name__)

router = APIRouter(
    responses={404: {"description": "Product not found"}}
)

class ProductBase(BaseModel):
    name: constr(min_length=1)
    description: Optional[str] = None
    image_url: UrlStr
    category: constr(min_length=1)
    stock_quantity: conint(ge=0)
    is_available: bool = True

class ProductCreate(ProductBase):
    price: confloat(gt=0, allow_inf_nan=False)

class ProductResponse(ProductBase):
    id: int
    price: Number
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

@router.get("", response_model=List[ProductResponse])
async def list_products(db: Session = Depends(get_db)):
    # Grouped by category, available products first within a category
    return (
        db.query(Product)
        .order_by(Product.category.asc(), Product.is_available.desc())
        .all()
    )

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db)
):
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return product

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db)
):
    data = product.model_dump()
    data["price"] = to_decimal(product.price)
    db_product = Product(**data)
    db.add(db_product)
    try:
        db.commit()
        db.refresh(db_product)
        return db_product
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error("Product creation failed", exc_info=True)
        raise
