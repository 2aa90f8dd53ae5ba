"""Signed bearer tokens.

Tokens are HS256 JWTs carrying the subject id, its role, the configured
issuer, the issue time and an expiry 30 days later (``JWT_ACCESS_TOKEN_EXPIRES``).
There is no revocation list.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from models.user import USER_ROLES

from .errors import InvalidTokenError, TokenExpiredError


@dataclass(frozen=True)
class TokenClaims:
    subject_id: str
    role: str


def issue_token(subject_id: str, role: str) -> str:
    """Return a signed token for ``subject_id`` acting with ``role``."""

    return create_access_token(identity=subject_id, additional_claims={"role": role})


def validate_token(token: str) -> TokenClaims:
    """Verify ``token`` and return the claims it asserts."""

    try:
        claims = decode_token(token)
    except ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except (PyJWTError, JWTExtendedException) as exc:
        raise InvalidTokenError() from exc

    subject_id = claims.get("sub")
    role = claims.get("role")
    if not isinstance(subject_id, str) or not subject_id or role not in USER_ROLES:
        raise InvalidTokenError("Token claims are incomplete.")
    return TokenClaims(subject_id=subject_id, role=role)
