"""Appointment domain schemas - Pydantic models for validation

``CustomerDetails`` is the single definition of the customer fields: the
booking wizard validates against it before submitting and the API validates
the full ``AppointmentCreate`` (which extends it) on arrival.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import (
    to_local_naive,
    validate_email,
    validate_phone,
    validate_required_text,
)

AppointmentStatus = Literal["pending", "confirmed", "cancelled", "completed"]


class CustomerDetails(BaseModel):
    """Customer contact details entered on the booking form"""

    customerName: str
    customerEmail: str
    customerPhone: str
    notes: Optional[str] = None

    @field_validator("customerName")
    @classmethod
    def validate_name(cls, v):
        return validate_required_text(v, "Name", min_length=2)

    @field_validator("customerEmail")
    @classmethod
    def validate_customer_email(cls, v):
        return validate_email(v)

    @field_validator("customerPhone")
    @classmethod
    def validate_customer_phone(cls, v):
        return validate_phone(v)


class AppointmentCreate(CustomerDetails):
    """Schema for booking an appointment

    serviceId/barberId/startTime accept their string forms (form posts send
    "1" and ISO-8601 strings). Neither id is checked against the catalog.
    """

    serviceId: int
    barberId: int
    startTime: datetime
    status: AppointmentStatus = "pending"

    @field_validator("startTime")
    @classmethod
    def validate_start_time(cls, v):
        return to_local_naive(v)


class AppointmentStatusUpdate(BaseModel):
    """Schema for an admin status change"""

    status: AppointmentStatus


class AppointmentResponse(BaseModel):
    """Schema for appointment response"""

    id: int
    customerName: str
    customerEmail: str
    customerPhone: str
    serviceId: int
    barberId: int
    startTime: datetime
    status: AppointmentStatus
    notes: Optional[str] = None
