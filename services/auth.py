"""Sign-in and bearer token validation."""

from __future__ import annotations

import logging

from stores import RecordNotFound
from stores import users as user_store

from .errors import NotFoundError, UnauthorizedError
from .identity import Identity
from .tokens import issue_token, validate_token
from .validation import require_email, require_text

logger = logging.getLogger(__name__)


def signin(email: str, password: str) -> str:
    """Return a bearer token for a verified user with matching credentials."""

    email = require_email(email)
    password = require_text(password, "password")

    try:
        user = user_store.find_by_email(email)
    except RecordNotFound as exc:
        raise NotFoundError("User not found.") from exc

    # Plaintext comparison; passwords are stored verbatim.
    if not user.check_password(password) or not user.verified:
        raise UnauthorizedError("Invalid credentials or unverified account.")

    return issue_token(user.id, user.role)


def validate(token: str) -> Identity:
    """Resolve a bearer token to the caller's identity.

    The user is re-read on every call so that deletion or loss of
    verification takes effect before the token expires.
    """

    claims = validate_token(token)

    try:
        user = user_store.find_by_id(claims.subject_id)
    except RecordNotFound as exc:
        logger.info("Token presented for missing user %s", claims.subject_id)
        raise NotFoundError("User not found.") from exc

    if not user.verified:
        raise UnauthorizedError("Account is not verified.")

    return Identity(id=claims.subject_id, role=claims.role)
