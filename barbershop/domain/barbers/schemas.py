"""Barber domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import reject_null, validate_required_text, validate_time_of_day


class WorkingHours(BaseModel):
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_time(cls, v):
        return validate_time_of_day(v)


class Availability(BaseModel):
    """Weekdays (0=Sunday .. 6=Saturday) plus a single daily time range"""

    days: list[int]
    hours: WorkingHours

    @field_validator("days")
    @classmethod
    def validate_days(cls, v):
        if any(day < 0 or day > 6 for day in v):
            raise ValueError("Days must be between 0 (Sunday) and 6 (Saturday)")
        return sorted(set(v))


class BarberCreate(BaseModel):
    """Schema for creating a new barber"""

    name: str
    bio: str
    image: str
    specialties: Optional[list[str]] = None
    availability: Availability

    @field_validator("name", "bio", "image")
    @classmethod
    def validate_text(cls, v, info):
        return validate_required_text(v, info.field_name.capitalize())


class BarberUpdate(BaseModel):
    """Schema for updating an existing barber

    Omitted fields are left alone. Only specialties may be cleared with null.
    """

    name: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None
    specialties: Optional[list[str]] = None
    availability: Optional[Availability] = None

    @field_validator("name", "bio", "image")
    @classmethod
    def validate_text(cls, v, info):
        label = info.field_name.capitalize()
        return validate_required_text(reject_null(v, label), label)

    @field_validator("availability")
    @classmethod
    def validate_availability(cls, v):
        return reject_null(v, "Availability")


class BarberResponse(BaseModel):
    """Schema for barber response"""

    id: int
    name: str
    bio: str
    image: str
    specialties: Optional[list[str]] = None
    availability: Availability

    class Config:
        from_attributes = True
