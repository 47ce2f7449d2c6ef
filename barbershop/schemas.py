from typing import Optional

from pydantic import BaseModel


class UserResponse(BaseModel):
    id: str
    displayName: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class ValidationErrorResponse(BaseModel):
    message: str
    field: Optional[str] = None
