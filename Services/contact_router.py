# Services/contact_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, EmailStr, constr
from typing import Optional
from datetime import datetime
import logging
from Models import ContactMessage
from database import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

class ContactMessageBase(BaseModel):
    name: constr(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    subject: constr(min_length=1)
    message: constr(min_length=1)

class ContactMessageCreate(ContactMessageBase):
    pass

class ContactMessageResponse(ContactMessageBase):
    id: int
    email: str
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

@router.post("",
    response_model=ContactMessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message through the contact form"
)
async def create_contact_message(
    contact_message: ContactMessageCreate,
    db: Session = Depends(get_db)
):
    db_message = ContactMessage(**contact_message.model_dump(), is_read=False)
    db.add(db_message)
    try:
        db.commit()
        db.refresh(db_message)
        return db_message
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error("Contact message creation failed", exc_info=True)
        raise
