"""Appointment service - Business logic for appointment operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Appointment
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, AppointmentResponse

logger = logging.getLogger(__name__)


def to_response(appointment: Appointment) -> AppointmentResponse:
    return AppointmentResponse(
        id=appointment.id,
        customerName=appointment.customer_name,
        customerEmail=appointment.customer_email,
        customerPhone=appointment.customer_phone,
        serviceId=appointment.service_id,
        barberId=appointment.barber_id,
        startTime=appointment.start_time,
        status=appointment.status,
        notes=appointment.notes,
    )


class AppointmentService:
    """Service layer for appointment business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AppointmentRepository()

    def get_appointments(self) -> list[Appointment]:
        """Get all appointments"""
        return self.repo.get_appointments(self.db)

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Book an appointment.

        The referenced service and barber are not looked up and no overlap
        check is made against existing bookings.
        """
        appointment_data = {
            "customer_name": data.customerName,
            "customer_email": data.customerEmail,
            "customer_phone": data.customerPhone,
            "service_id": data.serviceId,
            "barber_id": data.barberId,
            "start_time": data.startTime,
            "status": data.status,
            "notes": data.notes,
        }

        appointment = self.repo.create_appointment(self.db, **appointment_data)
        logger.info(
            f"Appointment booked: id={appointment.id} service={appointment.service_id} "
            f"barber={appointment.barber_id} start={appointment.start_time.isoformat()}"
        )
        return appointment

    def update_status(self, appointment_id: Optional[int], status: str) -> Appointment:
        """Change the status of an appointment; a None id is an unknown appointment"""
        appointment = None
        if appointment_id is not None:
            appointment = self.repo.update_status(self.db, appointment_id, status)
        if not appointment:
            raise HTTPException(status_code=404, detail="Appointment not found")
        logger.info(f"Appointment {appointment_id} status set to {status}")
        return appointment
