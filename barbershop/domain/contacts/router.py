"""Contact router - public contact form endpoint"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.routes import CONTACT_PATH
from .repository import ContactRepository
from .schemas import ContactCreate, ContactResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix=CONTACT_PATH, tags=["Contact"])


@router.post("", response_model=ContactResponse, status_code=201)
async def create_contact(data: ContactCreate, db: Session = Depends(get_db)):
    """Store a message from the contact form"""
    contact = ContactRepository.create_contact(
        db, name=data.name, email=data.email, message=data.message
    )
    logger.info(f"Contact message received: id={contact.id}")
    return ContactResponse(
        id=contact.id,
        name=contact.name,
        email=contact.email,
        message=contact.message,
        createdAt=contact.created_at,
    )
