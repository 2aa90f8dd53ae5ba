"""Verification code store, keyed by email."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from models import db
from models.email_verification import EmailVerification

from .errors import DuplicateRecord, RecordNotFound


def insert(record: EmailVerification) -> EmailVerification:
    """Insert a pending verification; never overwrites an existing one."""

    db.session.add(record)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise DuplicateRecord(
            f"A pending verification already exists for {record.email!r}."
        ) from exc
    return record


def find_by_email(email: str) -> EmailVerification:
    record = db.session.execute(
        select(EmailVerification).where(EmailVerification.email == email)
    ).scalar_one_or_none()
    if record is None:
        raise RecordNotFound(f"No pending verification for {email!r}.")
    return record


def replace(email: str, code: str, expiration: int, cooldown: int) -> EmailVerification:
    result = db.session.execute(
        update(EmailVerification)
        .where(EmailVerification.email == email)
        .values(code=code, expiration=expiration, cooldown=cooldown)
        .execution_options(synchronize_session="fetch")
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound(f"No pending verification for {email!r}.")
    db.session.commit()
    return find_by_email(email)


def delete_by_email(email: str) -> None:
    result = db.session.execute(
        delete(EmailVerification)
        .where(EmailVerification.email == email)
        .execution_options(synchronize_session="fetch")
    )
    if result.rowcount == 0:
        db.session.rollback()
        raise RecordNotFound(f"No pending verification for {email!r}.")
    db.session.commit()
