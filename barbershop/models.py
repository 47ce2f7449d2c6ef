from sqlalchemy import JSON, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from .database import Base


class User(Base):
    """Admin identity mirrored from the external auth provider"""

    __tablename__ = "users"

    id = Column(String(255), primary_key=True)  # Provider subject (e.g. Firebase uid)
    display_name = Column(String(255), nullable=True)


class Service(Base):
    __tablename__ = "services"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)  # Minor currency units (cents)
    duration = Column(Integer, nullable=False)  # Minutes
    image = Column(String(500), nullable=False)


class Barber(Base):
    __tablename__ = "barbers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    bio = Column(Text, nullable=False)
    image = Column(String(500), nullable=False)
    specialties = Column(JSON, nullable=True)  # list of tags
    # {"days": [0-6], "hours": {"start": "09:00", "end": "17:00"}}
    availability = Column(JSON, nullable=False)


class Appointment(Base):
    __tablename__ = "appointments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=False)
    # Weak references: no foreign keys, deleting a service/barber leaves the row alone
    service_id = Column(Integer, nullable=False)
    barber_id = Column(Integer, nullable=False)
    start_time = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    notes = Column(Text, nullable=True)


class Contact(Base):
    __tablename__ = "contacts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
