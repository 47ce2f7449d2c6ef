"""Barber router - FastAPI endpoints for barbers"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...shared.routes import BARBERS_PATH
from ...shared.validators import parse_id
from .repository import BarberRepository
from .schemas import BarberCreate, BarberResponse, BarberUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix=BARBERS_PATH, tags=["Barbers"])


@router.get("", response_model=list[BarberResponse])
async def list_barbers(db: Session = Depends(get_db)):
    """Get all barbers"""
    return BarberRepository.get_barbers(db)


@router.get("/{barber_id}", response_model=BarberResponse)
async def get_barber(barber_id: str, db: Session = Depends(get_db)):
    """Get a specific barber"""
    parsed_id = parse_id(barber_id)
    barber = None
    if parsed_id is not None:
        barber = BarberRepository.get_barber_by_id(db, parsed_id)
    if not barber:
        raise HTTPException(status_code=404, detail="Barber not found")
    return barber


@router.post(
    "",
    response_model=BarberResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_barber(data: BarberCreate, db: Session = Depends(get_db)):
    """Create a new barber"""
    barber = BarberRepository.create_barber(db, **data.model_dump())
    logger.info(f"Barber created: id={barber.id} name={barber.name!r}")
    return barber


@router.put(
    "/{barber_id}",
    response_model=BarberResponse,
    dependencies=[Depends(require_admin)],
)
async def update_barber(barber_id: str, data: BarberUpdate, db: Session = Depends(get_db)):
    """Update a barber"""
    parsed_id = parse_id(barber_id)
    barber = None
    if parsed_id is not None:
        barber = BarberRepository.update_barber(db, parsed_id, **data.model_dump(exclude_unset=True))
    if not barber:
        raise HTTPException(status_code=404, detail="Barber not found")
    logger.info(f"Barber updated: id={barber.id}")
    return barber


@router.delete("/{barber_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_barber(barber_id: str, db: Session = Depends(get_db)):
    """Delete a barber (idempotent)"""
    parsed_id = parse_id(barber_id)
    if parsed_id is not None:
        BarberRepository.delete_barber(db, parsed_id)
    logger.info(f"Barber deleted: id={barber_id}")
    return Response(status_code=204)
