# Models/service_booking.py
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from datetime import datetime
from .base import Base

class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class ServiceBooking(Base):
    __tablename__ = 'service_bookings'

    id = Column(Integer, primary_key=True, index=True)

    # Customer
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)

    # Requested service
    service_type = Column(String, nullable=False)
    vehicle_type = Column(String, nullable=True)
    preferred_date = Column(DateTime, nullable=False, index=True)
    preferred_time = Column(String, nullable=False)
    notes = Column(Text, nullable=True)

    status = Column(
        Enum(BookingStatus, name="booking_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=BookingStatus.PENDING
    )

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ServiceBooking {self.service_type} for {self.customer_name} ({self.status})>"
