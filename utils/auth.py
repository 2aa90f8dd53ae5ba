"""Bearer-token gate for authenticated blueprints."""

from __future__ import annotations

from functools import wraps

from flask import Request, g, request
from werkzeug.exceptions import BadRequest, Unauthorized

from services import auth as auth_service
from services.errors import NotFoundError, UnauthorizedError
from services.identity import Identity

BEARER_PREFIX = "Bearer "


def bearer_token(req: Request) -> str:
    """Return the token from an ``Authorization: Bearer`` header or raise 401."""

    authorization = req.headers.get("Authorization")
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthorized("A bearer token is required.")
    return authorization[len(BEARER_PREFIX):]


def authenticate_request() -> None:
    """``before_request`` hook that resolves the caller into ``g.identity``.

    Missing users and unverified accounts answer 401; malformed, forged or
    expired tokens answer 400.
    """

    token = bearer_token(request)
    try:
        g.identity = auth_service.validate(token)
    except (NotFoundError, UnauthorizedError) as exc:
        raise Unauthorized("Invalid credentials.") from exc


def with_identity(view):
    """Pass the authenticated caller to ``view`` as its first argument."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = g.get("identity")
        if not isinstance(identity, Identity):
            # The gate did not run for this route.
            raise BadRequest("Caller identity is missing.")
        return view(identity, *args, **kwargs)

    return wrapper
