"""Appointment repository - Database operations for appointments"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Appointment


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def get_appointments(db: Session) -> list[Appointment]:
        """Get all appointments"""
        return db.query(Appointment).order_by(Appointment.id).all()

    @staticmethod
    def get_appointment_by_id(db: Session, appointment_id: int) -> Optional[Appointment]:
        """Get a specific appointment by ID"""
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def create_appointment(db: Session, **appointment_data) -> Appointment:
        """Create a new appointment"""
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def update_status(db: Session, appointment_id: int, status: str) -> Optional[Appointment]:
        """Set the status of an appointment, None if it does not exist.

        No transition rules and no version check: the last write wins.
        """
        appointment = AppointmentRepository.get_appointment_by_id(db, appointment_id)
        if not appointment:
            return None

        appointment.status = status
        db.commit()
        db.refresh(appointment)
        return appointment
