# Services/booking_router.py
from fastapi import APIRouter, HTTPException, Depends, Path, status
from sqlalchemy import exc
from sqlalchemy.orm import Session
from pydantic import BaseModel, ConfigDict, EmailStr, constr
from typing import List, Optional
from datetime import datetime
import logging
from Models import ServiceBooking, BookingStatus
from database import get_db
from Services.common import MAX_ID, UtcDatetime

logger = logging.getLogger(__name__)

router = APIRouter(
    responses={404: {"description": "Booking not found"}}
)

class ServiceBookingBase(BaseModel):
    """
    Base booking schema with common attributes.

    Attributes:
        customer_name: Name of the customer
        customer_email: Contact email
        customer_phone: Contact phone number
        service_type: Requested service (e.g., "Oil change")
        vehicle_type: Optional vehicle description
        preferred_date: Day the customer would like to come in
        preferred_time: Free-form time of day (e.g., "10:00")
        notes: Optional remarks from the customer
    """
    customer_name: constr(min_length=1)
    customer_email: EmailStr
    customer_phone: constr(min_length=1)
    service_type: constr(min_length=1)
    vehicle_type: Optional[str] = None
    preferred_date: UtcDatetime
    preferred_time: constr(min_length=1)
    notes: Optional[str] = None

class ServiceBookingCreate(ServiceBookingBase):
    """Schema for booking a service. Every new booking starts as pending."""
    pass

class ServiceBookingStatusUpdate(BaseModel):
    """Any status may follow any other, no transition rules apply."""
    status: BookingStatus

class ServiceBookingResponse(ServiceBookingBase):
    """Schema for booking responses."""
    id: int
    customer_email: str
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

@router.get("",
    response_model=List[ServiceBookingResponse],
    summary="List all bookings",
    description="Earliest preferred date first. Bookings on the same date list the most recent request first."
)
async def list_bookings(db: Session = Depends(get_db)):
    return (
        db.query(ServiceBooking)
        .order_by(ServiceBooking.preferred_date.asc(), ServiceBooking.created_at.desc())
        .all()
    )

@router.post("",
    response_model=ServiceBookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book a service"
)
async def create_booking(
    booking: ServiceBookingCreate,
    db: Session = Depends(get_db)
):
    db_booking = ServiceBooking(**booking.model_dump(), status=BookingStatus.PENDING)
    db.add(db_booking)
    try:
        db.commit()
        db.refresh(db_booking)
        return db_booking
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error("Service booking creation failed", exc_info=True)
        raise

@router.patch("/{booking_id}/status",
    response_model=ServiceBookingResponse,
    summary="Change the status of a booking"
)
async def update_booking_status(
    update: ServiceBookingStatusUpdate,
    booking_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_booking = db.query(ServiceBooking).filter(ServiceBooking.id == booking_id).first()
    if not db_booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )

    db_booking.status = update.status
    db_booking.updated_at = datetime.utcnow()

    try:
        db.commit()
        db.refresh(db_booking)
        return db_booking
    except exc.SQLAlchemyError:
        db.rollback()
        logger.error(f"Status update failed for booking {booking_id}", exc_info=True)
        raise
