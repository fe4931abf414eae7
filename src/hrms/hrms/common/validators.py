from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: str) -> str:
    value = require_non_empty(value, "Email").lower()
    if not _EMAIL_RE.match(value):
        raise ValidationError("Email is not valid")
    return value


def require_non_negative_int(value, field_name: str) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_positive_id(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not valid")
    if number <= 0:
        raise ValidationError(f"{field_name} is not valid")
    return number
