"""Shared validation utilities"""

import re
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate a customer phone number.

    The number is kept as the customer typed it (trimmed); it only has to
    carry between 10 and 15 digits once punctuation is ignored.

    Raises:
        ValueError: If phone number is invalid
    """
    if phone is None:
        return phone

    phone = phone.strip()
    digits = re.sub(r"\D", "", phone)

    if len(digits) < 10 or len(digits) > 15:
        raise ValueError("Valid phone required")

    return phone


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if email is None:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email")

    return email


def validate_required_text(value: Optional[str], label: str, min_length: int = 1) -> Optional[str]:
    """Strip a text field and require at least ``min_length`` characters"""
    if value is None:
        return value

    value = value.strip()
    if len(value) < min_length:
        raise ValueError(f"{label} required")
    return value


def validate_time_of_day(value: str) -> str:
    """Validate a 24h "HH:MM" string"""
    if not TIME_OF_DAY_PATTERN.match(value or ""):
        raise ValueError("Time must be in HH:MM format")
    return value


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to server local time without tzinfo"""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc if part != "body")


def _clean_message(message: str) -> str:
    # pydantic prefixes errors raised from validators with "Value error, "
    return message.removeprefix("Value error, ")


def error_list(exc: ValidationError) -> list[tuple[str, str]]:
    """Flatten a pydantic ValidationError into (field path, message) pairs"""
    return [(_field_path(err["loc"]), _clean_message(err["msg"])) for err in exc.errors()]


def first_error(errors: list[dict]) -> tuple[Optional[str], str]:
    """Return (field, message) for the first error of a FastAPI error list"""
    if not errors:
        return None, "Invalid request"
    err = errors[0]
    field = _field_path(tuple(err.get("loc", ())))
    return field or None, _clean_message(err.get("msg", "Invalid request"))


def validate(model: type[BaseModel], data: dict[str, Any]):
    """
    Validate ``data`` against ``model``.

    Returns:
        (instance, {}) on success, (None, {field: message}) on failure.
        Only the first message per field is kept.
    """
    try:
        return model.model_validate(data), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for field, message in error_list(exc):
            errors.setdefault(field, message)
        return None, errors


def reject_null(value: Any, label: str) -> Any:
    """Partial updates may omit a required field but never clear it"""
    if value is None:
        raise ValueError(f"{label} cannot be null")
    return value


def parse_id(value: str) -> Optional[int]:
    """Numeric path id, or None when the segment is not a number (an unknown id)"""
    try:
        return int(value)
    except ValueError:
        return None
