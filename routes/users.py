"""User management blueprint.

``me`` may be used in place of an id to address the caller. Changing or
deleting another user requires the admin role.
"""

from __future__ import annotations

from flask import Blueprint, request

from services import users as user_service
from services.errors import UnauthorizedError
from services.identity import Identity
from utils.auth import authenticate_request, with_identity
from utils.payload import ok
from utils.request_validation import parse_json_request, pick

users_bp = Blueprint("users", __name__)
users_bp.before_request(authenticate_request)

SELF_ALIAS = "me"


def _resolve_target(identity: Identity, user_id: str, *, admin_for_others: bool) -> str:
    if user_id == SELF_ALIAS:
        return identity.id
    if admin_for_others and not identity.is_admin:
        raise UnauthorizedError("Admin privileges required.")
    return user_id


@users_bp.route("", methods=["POST"])
@with_identity
def create_user(identity: Identity):
    """Create an account on behalf of someone else. Admins only."""

    if not identity.is_admin:
        raise UnauthorizedError("Admin privileges required.")

    payload = parse_json_request(request)
    user = user_service.create(*pick(payload, "name", "email", "password"))
    return ok(user.to_dict())


@users_bp.route("", methods=["GET"])
def list_users():
    return ok([user.to_dict() for user in user_service.find_all()])


@users_bp.route("/<user_id>", methods=["GET"])
@with_identity
def get_user(identity: Identity, user_id: str):
    target = _resolve_target(identity, user_id, admin_for_others=False)
    return ok(user_service.find_by_id(target).to_dict())


@users_bp.route("/<user_id>", methods=["PUT"])
@with_identity
def update_user(identity: Identity, user_id: str):
    target = _resolve_target(identity, user_id, admin_for_others=True)
    payload = parse_json_request(request)
    return ok(user_service.update(target, payload.get("name")).to_dict())


@users_bp.route("/<user_id>", methods=["DELETE"])
@with_identity
def delete_user(identity: Identity, user_id: str):
    target = _resolve_target(identity, user_id, admin_for_others=True)
    user_service.delete(target)
    return ok()
