"""Field validation shared by the services."""

from __future__ import annotations

import re

from .errors import BadRequestError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
NAME_MAX_LENGTH = 128
PASSWORD_MIN_LENGTH = 8


def require_text(value, field: str, *, min_length: int = 1, max_length: int | None = None) -> str:
    if not isinstance(value, str):
        raise BadRequestError(f"{field} must be a string.")
    if len(value) < min_length:
        raise BadRequestError(f"{field} must be at least {min_length} characters.")
    if max_length is not None and len(value) > max_length:
        raise BadRequestError(f"{field} must be at most {max_length} characters.")
    return value


def require_name(value, field: str = "name") -> str:
    return require_text(value, field, max_length=NAME_MAX_LENGTH)


def require_email(value) -> str:
    email = require_text(value, "email")
    if not EMAIL_PATTERN.match(email):
        raise BadRequestError("email must be a valid email address.")
    return email


def require_password(value) -> str:
    return require_text(value, "password", min_length=PASSWORD_MIN_LENGTH)
