"""Appointment router - FastAPI endpoints for bookings"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...shared.routes import APPOINTMENTS_PATH
from ...shared.validators import parse_id
from .schemas import AppointmentCreate, AppointmentResponse, AppointmentStatusUpdate
from .service import AppointmentService, to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix=APPOINTMENTS_PATH, tags=["Appointments"])


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db)


@router.get(
    "",
    response_model=list[AppointmentResponse],
    dependencies=[Depends(require_admin)],
)
async def list_appointments(service: AppointmentService = Depends(get_appointment_service)):
    """Get all appointments (admin)"""
    return [to_response(a) for a in service.get_appointments()]


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Public booking endpoint used by the booking wizard"""
    return to_response(service.create_appointment(data))


@router.patch(
    "/{appointment_id}/status",
    response_model=AppointmentResponse,
    dependencies=[Depends(require_admin)],
)
async def update_appointment_status(
    appointment_id: str,
    data: AppointmentStatusUpdate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Set an appointment's status (any status, from any status)"""
    return to_response(service.update_status(parse_id(appointment_id), data.status))
