"""Account operations."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from models.user import User
from stores import DuplicateRecord, RecordNotFound
from stores import users as user_store

from . import verification
from .errors import DuplicateError, NotFoundError
from .identity import ROLE_CLIENT
from .validation import require_email, require_name, require_password

logger = logging.getLogger(__name__)


def create(name, email, password) -> User:
    """Create an unverified client account and mail it a verification code.

    The mail is sent on a worker thread while the user row is inserted; both
    are joined before returning. A failed insert does not recall the mail,
    and a failed send leaves the account without a pending verification.
    """

    name = require_name(name)
    email = require_email(email)
    password = require_password(password)

    settings = verification.mail_settings()
    pending = verification.prepare(email)
    user = User(name=name, role=ROLE_CLIENT, email=email, password=password, verified=False)

    with ThreadPoolExecutor(max_workers=1) as pool:
        sending = pool.submit(verification.deliver, settings, pending)
        try:
            user = user_store.insert(user)
        except DuplicateRecord as exc:
            raise DuplicateError("A user with that email already exists.") from exc
        sending.result(timeout=settings.timeout)

    verification.record(pending)
    logger.info("Created user %s", user.id)
    return user


def find_by_id(user_id: str) -> User:
    try:
        return user_store.find_by_id(user_id)
    except RecordNotFound as exc:
        raise NotFoundError("User not found.") from exc


def find_all() -> list[User]:
    return user_store.find_all()


def update(user_id: str, name) -> User:
    """Change the display name of a user. Other fields are left untouched."""

    name = require_name(name)
    try:
        return user_store.update_fields(user_id, name=name)
    except RecordNotFound as exc:
        raise NotFoundError("User not found.") from exc


def delete(user_id: str) -> None:
    """Delete a user. Stacks they own are left in place."""

    try:
        user_store.delete_by_id(user_id)
    except RecordNotFound as exc:
        raise NotFoundError("User not found.") from exc
    logger.info("Deleted user %s", user_id)


def resend(email) -> None:
    verification.recreate(require_email(email))


def verify(email, code) -> User:
    """Consume a verification code and mark the matching user verified."""

    email = require_email(email)
    verification.verify(email, code)

    try:
        user = user_store.find_by_email(email)
        return user_store.update_fields(user.id, verified=True)
    except RecordNotFound as exc:
        raise NotFoundError("User not found.") from exc
