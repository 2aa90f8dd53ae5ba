"""Authentication blueprint: sign-in, sign-up and email verification."""

from __future__ import annotations

from flask import Blueprint, request

from services import auth as auth_service
from services import users as user_service
from services.errors import NotFoundError, UnauthorizedError
from utils.payload import ok
from utils.request_validation import parse_json_request, pick

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/signin", methods=["POST"])
def signin() -> tuple:
    """Exchange email and password for a bearer token."""
    payload = parse_json_request(request, required_keys=("email", "password"))

    try:
        token = auth_service.signin(*pick(payload, "email", "password"))
    except NotFoundError as exc:
        # Unknown emails look the same as wrong passwords.
        raise UnauthorizedError("Invalid email or password.") from exc

    return ok(token)


@auth_bp.route("/signup", methods=["POST"])
def signup() -> tuple:
    """Register an unverified client account and mail its verification code."""
    payload = parse_json_request(request)
    user = user_service.create(*pick(payload, "name", "email", "password"))
    return ok(user.to_dict())


@auth_bp.route("/verification", methods=["POST"])
def verification() -> tuple:
    """Verify an account with the code that was mailed to it."""
    payload = parse_json_request(request)
    user = user_service.verify(*pick(payload, "email", "code"))
    return ok(user.to_dict())


@auth_bp.route("/resend", methods=["POST"])
def resend() -> tuple:
    """Mail a fresh verification code once the cooldown has passed."""
    payload = parse_json_request(request)
    user_service.resend(payload.get("email"))
    return ok()
