"""Stack operations.

Every mutation reads the whole stack, changes its item list in memory and
writes the whole document back by id. Two concurrent mutations of the same
stack can therefore lose an update: both read the same items and the later
write wins. ``stack_guard`` is the place to serialize writers; it only locks
when ``STACK_SERIALIZE_WRITES`` is enabled.

The ``*_from_owner`` functions look the stack up among the caller's own
stacks, so a stack owned by someone else is simply not found. ``find_by_id``,
``find_all``, ``push`` and ``pop`` skip that scoping. They are unprotected and
no route exposes them.
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext

from flask import current_app

from models.stack import Stack
from stores import DuplicateRecord, RecordNotFound
from stores import stacks as stack_store
from stores import users as user_store

from .errors import DuplicateError, EmptyStackError, NotFoundError
from .validation import require_name

logger = logging.getLogger(__name__)


class StackLockRegistry:
    """Process-local locks, one per stack id.

    Locks are never released, so the registry holds at most one lock per
    stack that has been written since the process started.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, stack_id: str) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(stack_id, threading.Lock())


def stack_guard(stack_id: str):
    """Return the context manager that brackets a read-modify-write."""

    if not current_app.config.get("STACK_SERIALIZE_WRITES"):
        return nullcontext()
    return current_app.extensions["stack_locks"].lock_for(stack_id)


def create(owner_id: str) -> Stack:
    """Create an empty stack for an existing user."""

    try:
        owner = user_store.find_by_id(owner_id)
    except RecordNotFound as exc:
        raise NotFoundError("User not found.") from exc

    try:
        return stack_store.insert(Stack(owner=owner.id, items=[]))
    except DuplicateRecord as exc:
        raise DuplicateError("Stack already exists.") from exc


def find_all_from_owner(owner_id: str) -> list[Stack]:
    return stack_store.find_by_owner(owner_id)


def find_by_id_from_owner(stack_id: str, owner_id: str) -> Stack:
    stacks = stack_store.find_by_owner(owner_id)
    if not stacks:
        raise NotFoundError("Stack not found.")
    for stack in stacks:
        if stack.id == stack_id:
            return stack
    raise NotFoundError("Stack not found.")


def push_from_owner(stack_id: str, owner_id: str, name) -> dict:
    name = require_name(name)
    with stack_guard(stack_id):
        return _push_onto(find_by_id_from_owner(stack_id, owner_id), name)


def pop_from_owner(stack_id: str, owner_id: str) -> dict:
    with stack_guard(stack_id):
        return _pop_from(find_by_id_from_owner(stack_id, owner_id))


# Unprotected variants: no ownership scoping.


def find_by_id(stack_id: str) -> Stack:
    try:
        return stack_store.find_by_id(stack_id)
    except RecordNotFound as exc:
        raise NotFoundError("Stack not found.") from exc


def find_all() -> list[Stack]:
    return stack_store.find_all()


def push(stack_id: str, name) -> dict:
    name = require_name(name)
    with stack_guard(stack_id):
        return _push_onto(find_by_id(stack_id), name)


def pop(stack_id: str) -> dict:
    with stack_guard(stack_id):
        return _pop_from(find_by_id(stack_id))


def _push_onto(stack: Stack, name: str) -> dict:
    items = [dict(item) for item in stack.items or []]
    item = {"index": len(items), "name": name}
    items.append(item)
    _write(stack, items)
    return item


def _pop_from(stack: Stack) -> dict:
    items = [dict(item) for item in stack.items or []]
    if not items:
        raise EmptyStackError()
    item = items.pop()
    _write(stack, items)
    return item


def _write(stack: Stack, items: list[dict]) -> None:
    try:
        stack_store.replace(stack.id, stack.owner, items)
    except RecordNotFound as exc:
        logger.warning("Stack %s disappeared before its items were written", stack.id)
        raise NotFoundError("Stack not found.") from exc
