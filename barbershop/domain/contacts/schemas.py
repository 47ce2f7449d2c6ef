"""Contact domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_required_text


class ContactCreate(BaseModel):
    """Schema for the public contact form"""

    name: str
    email: str
    message: str

    @field_validator("name", "message")
    @classmethod
    def validate_text(cls, v, info):
        return validate_required_text(v, info.field_name.capitalize())

    @field_validator("email")
    @classmethod
    def validate_contact_email(cls, v):
        return validate_email(v)


class ContactResponse(BaseModel):
    """Schema for contact response"""

    id: int
    name: str
    email: str
    message: str
    createdAt: Optional[datetime] = None
