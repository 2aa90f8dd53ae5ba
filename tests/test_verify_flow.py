"""Verification code lifecycle tests."""

from __future__ import annotations

import random

import pytest

from models.email_verification import EmailVerification
from services import verification
from services.errors import (
    BadRequestError,
    DuplicateError,
    NotFoundError,
    UnauthorizedError,
)

EMAIL = "ann@x.com"


@pytest.fixture()
def clock(monkeypatch):
    """Freeze the verification clock; advance it by assigning ``clock.now``."""

    class _Clock:
        now = 1_700_000_000.0

    monkeypatch.setattr(verification, "_now", lambda: _Clock.now)
    return _Clock


def _wrong(code: str) -> str:
    return "AAAAAA" if code != "AAAAAA" else "BBBBBB"


def test_generate_code_uses_uppercase_alphanumerics():
    rng = random.Random(7)
    codes = {verification.generate_code(rng) for _ in range(50)}

    for code in codes:
        assert len(code) == 6
        assert set(code) <= set(verification.CODE_ALPHABET)
    assert len(codes) > 1


def test_create_sends_and_stores_code(app, mailer, clock):
    with app.app_context():
        record = verification.create(EMAIL)

        assert record.email == EMAIL
        assert record.expiration == int(clock.now) + 600
        assert record.cooldown == int(clock.now) + 60
        code = record.code

    [sent] = mailer.sent
    assert sent.recipient == EMAIL
    assert sent.subject == "Email Verification"
    assert sent.sender == app.config["MAIL_SENDER"]
    assert sent.timeout == app.config["MAIL_TIMEOUT"]
    assert code in sent.body


def test_create_is_not_an_upsert(app, mailer, clock):
    with app.app_context():
        first = verification.create(EMAIL).code

        with pytest.raises(DuplicateError):
            verification.create(EMAIL)

        stored = EmailVerification.query.filter_by(email=EMAIL).one()
        assert stored.code == first

    # The second mail went out before the insert was refused.
    assert len(mailer.sent) == 2


def test_verify_consumes_code_once(app, clock):
    with app.app_context():
        code = verification.create(EMAIL).code

        with pytest.raises(UnauthorizedError):
            verification.verify(EMAIL, _wrong(code))
        verification.verify(EMAIL, code)
        assert EmailVerification.query.filter_by(email=EMAIL).first() is None

        with pytest.raises(NotFoundError):
            verification.verify(EMAIL, code)


def test_verify_rejects_expired_code(app, clock):
    with app.app_context():
        record = verification.create(EMAIL)
        code = record.code

        clock.now = record.expiration

        with pytest.raises(UnauthorizedError):
            verification.verify(EMAIL, code)


def test_verify_accepts_code_just_before_expiry(app, clock):
    with app.app_context():
        record = verification.create(EMAIL)
        code = record.code
        clock.now = record.expiration - 1

        verification.verify(EMAIL, code)


@pytest.mark.parametrize("code", ["", "ABC", "ABCDEFG", None])
def test_verify_rejects_malformed_code(app, code):
    with app.app_context():
        with pytest.raises(BadRequestError):
            verification.verify(EMAIL, code)


def test_verify_unknown_email_is_not_found(app):
    with app.app_context():
        with pytest.raises(NotFoundError):
            verification.verify("nobody@example.com", "ABC123")


def test_recreate_requires_pending_record(app, mailer):
    with app.app_context():
        with pytest.raises(NotFoundError):
            verification.recreate(EMAIL)

    assert mailer.sent == []


def test_recreate_respects_cooldown(app, mailer, clock):
    with app.app_context():
        verification.create(EMAIL)
        clock.now += 59

        with pytest.raises(UnauthorizedError):
            verification.recreate(EMAIL)

    assert len(mailer.sent) == 1


def test_recreate_after_cooldown_replaces_code(app, mailer, clock):
    with app.app_context():
        old_code = verification.create(EMAIL).code
        clock.now += 60

        renewed = verification.recreate(EMAIL)
        new_code = renewed.code

        assert renewed.expiration == int(clock.now) + 600
        assert renewed.cooldown == int(clock.now) + 60
        assert new_code != old_code

        with pytest.raises(UnauthorizedError):
            verification.verify(EMAIL, old_code)
        verification.verify(EMAIL, new_code)

    assert len(mailer.sent) == 2
    assert new_code in mailer.sent[-1].body


def test_resend_route(client, mailer, clock):
    client.post(
        "/signup", json={"name": "Ann", "email": EMAIL, "password": "password1"}
    )

    assert client.post("/resend", json={"email": EMAIL}).status_code == 401

    clock.now += 61
    response = client.post("/resend", json={"email": EMAIL})

    assert response.status_code == 200
    assert response.get_json() == {
        "code": 200,
        "status": "OK",
        "success": True,
        "data": None,
    }
    assert len(mailer.sent_to(EMAIL)) == 2


def test_resend_rejects_invalid_email(client):
    assert client.post("/resend", json={"email": "nope"}).status_code == 400


def test_verify_is_case_sensitive(app, monkeypatch):
    monkeypatch.setattr(verification, "generate_code", lambda rng: "ABC123")

    with app.app_context():
        verification.create(EMAIL)

        with pytest.raises(UnauthorizedError):
            verification.verify(EMAIL, "abc123")
        verification.verify(EMAIL, "ABC123")
