"""Email verification codes.

A code is six characters drawn uniformly from ``A-Z0-9`` with
``random.Random``. That generator is not cryptographically secure; the code
only proves that the holder can read mail sent to the address, and it expires
after ``VERIFICATION_CODE_TTL`` seconds.

Lifecycle for one email:

* ``create``   - send a code and insert the pending record (never an upsert).
* ``recreate`` - after the cooldown, send a fresh code and replace the record.
* ``verify``   - check the code and delete the record, making it single use.
"""

from __future__ import annotations

import logging
import random
import string
import time
from dataclasses import dataclass

from flask import current_app

from mail import AbstractMailer
from models.email_verification import EmailVerification
from stores import DuplicateRecord, RecordNotFound
from stores import email_verifications as verification_store

from .errors import BadRequestError, DuplicateError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 6


@dataclass(frozen=True)
class MailSettings:
    """Everything needed to deliver a code outside the application context."""

    mailer: AbstractMailer
    sender: str
    subject: str
    timeout: float | None


@dataclass(frozen=True)
class PendingCode:
    email: str
    code: str
    expiration: int
    cooldown: int


def _now() -> float:
    return time.time()


def generate_code(rng: random.Random) -> str:
    return "".join(rng.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


def mail_settings() -> MailSettings:
    config = current_app.config
    return MailSettings(
        mailer=current_app.extensions["mailer"],
        sender=config.get("MAIL_SENDER", "no-reply@localhost"),
        subject=config.get("VERIFICATION_SUBJECT", "Email Verification"),
        timeout=config.get("MAIL_TIMEOUT"),
    )


def prepare(email: str) -> PendingCode:
    """Draw a new code and compute its expiry and resend cooldown."""

    config = current_app.config
    now = int(_now())
    return PendingCode(
        email=email,
        code=generate_code(current_app.extensions["verification_rng"]),
        expiration=now + int(config.get("VERIFICATION_CODE_TTL", 600)),
        cooldown=now + int(config.get("VERIFICATION_COOLDOWN", 60)),
    )


def deliver(settings: MailSettings, pending: PendingCode) -> None:
    """Send the code to its address. Safe to call from a worker thread."""

    body = (
        f"Your verification code is {pending.code}.\n"
        "Enter it to activate your account.\n"
    )
    try:
        settings.mailer.send(
            settings.sender,
            pending.email,
            settings.subject,
            body,
            timeout=settings.timeout,
        )
    except Exception:
        logger.warning("Verification mail to %s could not be sent", pending.email)
        raise


def record(pending: PendingCode) -> EmailVerification:
    """Insert the pending record, failing if one already exists."""

    try:
        return verification_store.insert(
            EmailVerification(
                email=pending.email,
                code=pending.code,
                expiration=pending.expiration,
                cooldown=pending.cooldown,
            )
        )
    except DuplicateRecord as exc:
        raise DuplicateError("A verification is already pending for this email.") from exc


def create(email: str) -> EmailVerification:
    """Send a new code to ``email`` and store it."""

    pending = prepare(email)
    deliver(mail_settings(), pending)
    return record(pending)


def recreate(email: str) -> EmailVerification:
    """Replace the pending code for ``email`` once its cooldown has passed."""

    try:
        existing = verification_store.find_by_email(email)
    except RecordNotFound as exc:
        raise NotFoundError("No pending verification for this email.") from exc

    if existing.in_cooldown(_now()):
        raise UnauthorizedError("A new code cannot be requested yet.")

    pending = prepare(email)
    deliver(mail_settings(), pending)

    try:
        return verification_store.replace(
            email, pending.code, pending.expiration, pending.cooldown
        )
    except RecordNotFound as exc:
        raise NotFoundError("No pending verification for this email.") from exc


def verify(email: str, code: str) -> None:
    """Consume the pending code for ``email`` if ``code`` matches."""

    if not isinstance(code, str) or len(code) != CODE_LENGTH:
        raise BadRequestError(f"code must be {CODE_LENGTH} characters.")

    try:
        pending = verification_store.find_by_email(email)
    except RecordNotFound as exc:
        raise NotFoundError("No pending verification for this email.") from exc

    if pending.is_expired(_now()):
        raise UnauthorizedError("Verification code has expired.")
    if code != pending.code:
        raise UnauthorizedError("Verification code does not match.")

    try:
        verification_store.delete_by_email(email)
    except RecordNotFound as exc:
        raise NotFoundError("No pending verification for this email.") from exc

    logger.info("Email %s verified", email)
