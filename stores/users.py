"""Account store."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from models import db
from models.user import User

from .errors import DuplicateRecord, RecordNotFound


def insert(user: User) -> User:
    """Persist a new user, assigning its id."""

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise DuplicateRecord(f"User with email {user.email!r} already exists.") from exc
    return user


def find_by_id(user_id: str) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise RecordNotFound(f"User {user_id!r} not found.")
    return user


def find_by_email(email: str) -> User:
    user = db.session.execute(
        select(User).where(User.email == email)
    ).scalar_one_or_none()
    if user is None:
        raise RecordNotFound(f"User with email {email!r} not found.")
    return user


def find_all() -> list[User]:
    return list(db.session.execute(select(User).order_by(User.id)).scalars())


def update_fields(user_id: str, **values) -> User:
    """Set the given columns on one user by id."""

    result = db.session.execute(
        update(User).where(User.id == user_id).values(**values)
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound(f"User {user_id!r} not found.")
    db.session.commit()
    return find_by_id(user_id)


def delete_by_id(user_id: str) -> None:
    result = db.session.execute(delete(User).where(User.id == user_id))
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound(f"User {user_id!r} not found.")
    db.session.commit()
