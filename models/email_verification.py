"""Pending email verification model."""

from . import db


class EmailVerification(db.Model):
    """A single-use code proving control of an email address.

    ``expiration`` and ``cooldown`` are unix timestamps. One row may exist per
    email at a time.
    """

    __tablename__ = "email_verifications"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    code = db.Column(db.String(6), nullable=False)
    expiration = db.Column(db.BigInteger, nullable=False)
    cooldown = db.Column(db.BigInteger, nullable=False)

    def is_expired(self, now: float) -> bool:
        return now >= self.expiration

    def in_cooldown(self, now: float) -> bool:
        return now < self.cooldown

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<EmailVerification {self.email}>"
