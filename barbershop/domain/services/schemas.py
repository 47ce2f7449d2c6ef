"""Service domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import reject_null, validate_required_text


class ServiceCreate(BaseModel):
    """Schema for creating a new service (price in cents, duration in minutes)"""

    name: str
    description: str
    price: int = Field(ge=0)
    duration: int = Field(gt=0)
    image: str

    @field_validator("name", "description", "image")
    @classmethod
    def validate_text(cls, v, info):
        return validate_required_text(v, info.field_name.capitalize())


class ServiceUpdate(BaseModel):
    """Schema for updating an existing service

    Omitted fields are left alone; required fields cannot be set to null.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, gt=0)
    image: Optional[str] = None

    @field_validator("name", "description", "image")
    @classmethod
    def validate_text(cls, v, info):
        label = info.field_name.capitalize()
        return validate_required_text(reject_null(v, label), label)

    @field_validator("price", "duration")
    @classmethod
    def validate_not_null(cls, v, info):
        return reject_null(v, info.field_name.capitalize())


class ServiceResponse(BaseModel):
    """Schema for service response"""

    id: int
    name: str
    description: str
    price: int
    duration: int
    image: str

    class Config:
        from_attributes = True
