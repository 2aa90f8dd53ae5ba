"""Stack store.

Stacks are read as whole documents and written back with a whole-document
replace keyed by id. Nothing here guards the read-modify-write sequence.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from models import db
from models.stack import Stack

from .errors import DuplicateRecord, RecordNotFound


def insert(stack: Stack) -> Stack:
    db.session.add(stack)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise DuplicateRecord(f"Stack {stack.id!r} already exists.") from exc
    return stack


def find_by_id(stack_id: str) -> Stack:
    stack = db.session.get(Stack, stack_id)
    if stack is None:
        raise RecordNotFound(f"Stack {stack_id!r} not found.")
    return stack


def find_by_owner(owner_id: str) -> list[Stack]:
    return list(
        db.session.execute(
            select(Stack).where(Stack.owner == owner_id).order_by(Stack.id)
        ).scalars()
    )


def find_all() -> list[Stack]:
    return list(db.session.execute(select(Stack).order_by(Stack.id)).scalars())


def replace(stack_id: str, owner: str, items: list[dict]) -> Stack:
    """Overwrite the stored document for ``stack_id``."""

    result = db.session.execute(
        update(Stack)
        .where(Stack.id == stack_id)
        .values(owner=owner, items=items)
        .execution_options(synchronize_session="fetch")
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound(f"Stack {stack_id!r} not found.")
    db.session.commit()
    return find_by_id(stack_id)
