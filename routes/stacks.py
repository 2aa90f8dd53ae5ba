"""Stacks blueprint. Every route acts on the caller's own stacks."""

from __future__ import annotations

from flask import Blueprint, request

from services import stacks as stack_service
from services.identity import Identity
from utils.auth import authenticate_request, with_identity
from utils.payload import ok
from utils.request_validation import parse_json_request

stacks_bp = Blueprint("stacks", __name__)
stacks_bp.before_request(authenticate_request)


@stacks_bp.route("", methods=["POST"])
@with_identity
def create_stack(identity: Identity):
    return ok(stack_service.create(identity.id).to_dict())


@stacks_bp.route("", methods=["GET"])
@with_identity
def list_stacks(identity: Identity):
    stacks = stack_service.find_all_from_owner(identity.id)
    return ok([stack.to_dict() for stack in stacks])


@stacks_bp.route("/<stack_id>", methods=["GET"])
@with_identity
def get_stack(identity: Identity, stack_id: str):
    return ok(stack_service.find_by_id_from_owner(stack_id, identity.id).to_dict())


@stacks_bp.route("/<stack_id>", methods=["POST"])
@with_identity
def push_item(identity: Identity, stack_id: str):
    """Push a named item; the response carries its assigned index."""

    payload = parse_json_request(request)
    item = stack_service.push_from_owner(stack_id, identity.id, payload.get("name"))
    return ok(item)


@stacks_bp.route("/<stack_id>", methods=["DELETE"])
@with_identity
def pop_item(identity: Identity, stack_id: str):
    """Remove and return the most recently pushed item."""

    return ok(stack_service.pop_from_owner(stack_id, identity.id))
