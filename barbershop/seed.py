"""
Demo catalog for a first run.

Seeds three services and two barbers when the respective table is empty.
Safe to call on every startup.
"""

import logging

from sqlalchemy.orm import Session

from .domain.barbers.repository import BarberRepository
from .domain.services.repository import ServiceRepository

logger = logging.getLogger(__name__)

DEMO_SERVICES = [
    {
        "name": "Classic Haircut",
        "description": "Traditional scissor cut with hot towel finish.",
        "price": 3500,  # $35.00
        "duration": 30,
        "image": "https://images.unsplash.com/photo-1599351431202-6e0005079746?auto=format&fit=crop&q=80",
    },
    {
        "name": "Beard Trim",
        "description": "Expert shaping and trimming of facial hair.",
        "price": 2500,  # $25.00
        "duration": 20,
        "image": "https://images.unsplash.com/photo-1621605815971-fbc98d665033?auto=format&fit=crop&q=80",
    },
    {
        "name": "Royal Shave",
        "description": "Straight razor shave with hot lather and oils.",
        "price": 4500,  # $45.00
        "duration": 45,
        "image": "https://images.unsplash.com/photo-1503951914875-452162b0f3f1?auto=format&fit=crop&q=80",
    },
]

DEMO_BARBERS = [
    {
        "name": "James 'The Blade'",
        "bio": "Master barber with 15 years of experience in classic cuts.",
        "image": "https://images.unsplash.com/photo-1519085360753-af0119f7cbe7?auto=format&fit=crop&q=80",
        "specialties": ["Fades", "Hot Towel Shaves"],
        "availability": {"days": [1, 2, 3, 4, 5, 6], "hours": {"start": "09:00", "end": "18:00"}},
    },
    {
        "name": "Sarah Styles",
        "bio": "Specializing in modern styles and beard grooming.",
        "image": "https://images.unsplash.com/photo-1521225099409-8e1efc95321d?auto=format&fit=crop&q=80",
        "specialties": ["Beard Trims", "Modern Styles"],
        "availability": {"days": [0, 2, 3, 4, 5], "hours": {"start": "10:00", "end": "19:00"}},
    },
]


def seed_database(db: Session) -> dict:
    """Insert the demo catalog into empty tables and report what was added"""
    result = {"services": 0, "barbers": 0}

    if not ServiceRepository.get_services(db):
        logger.info("Seeding services...")
        for service in DEMO_SERVICES:
            ServiceRepository.create_service(db, **service)
        result["services"] = len(DEMO_SERVICES)

    if not BarberRepository.get_barbers(db):
        logger.info("Seeding barbers...")
        for barber in DEMO_BARBERS:
            BarberRepository.create_barber(db, **barber)
        result["barbers"] = len(DEMO_BARBERS)

    return result
