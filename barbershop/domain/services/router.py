"""Service router - FastAPI endpoints for the service catalog"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...shared.routes import SERVICES_PATH
from ...shared.validators import parse_id
from .repository import ServiceRepository
from .schemas import ServiceCreate, ServiceResponse, ServiceUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix=SERVICES_PATH, tags=["Services"])


@router.get("", response_model=list[ServiceResponse])
async def list_services(db: Session = Depends(get_db)):
    """Get the full service catalog"""
    return ServiceRepository.get_services(db)


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, db: Session = Depends(get_db)):
    """Get a specific service"""
    parsed_id = parse_id(service_id)
    service = None
    if parsed_id is not None:
        service = ServiceRepository.get_service_by_id(db, parsed_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.post(
    "",
    response_model=ServiceResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_service(data: ServiceCreate, db: Session = Depends(get_db)):
    """Create a new service"""
    service = ServiceRepository.create_service(db, **data.model_dump())
    logger.info(f"Service created: id={service.id} name={service.name!r}")
    return service


@router.put(
    "/{service_id}",
    response_model=ServiceResponse,
    dependencies=[Depends(require_admin)],
)
async def update_service(service_id: str, data: ServiceUpdate, db: Session = Depends(get_db)):
    """Update a service"""
    parsed_id = parse_id(service_id)
    service = None
    if parsed_id is not None:
        service = ServiceRepository.update_service(db, parsed_id, **data.model_dump(exclude_unset=True))
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    logger.info(f"Service updated: id={service.id}")
    return service


@router.delete("/{service_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_service(service_id: str, db: Session = Depends(get_db)):
    """Delete a service (idempotent)"""
    parsed_id = parse_id(service_id)
    if parsed_id is not None:
        ServiceRepository.delete_service(db, parsed_id)
    logger.info(f"Service deleted: id={service_id}")
    return Response(status_code=204)
