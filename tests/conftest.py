"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from fakes import RecordingMailer  # noqa: E402
from models import db  # noqa: E402
from models.email_verification import EmailVerification  # noqa: E402
from models.user import User  # noqa: E402

DEFAULT_PASSWORD = "password1"


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS: dict = {}
    JWT_SECRET_KEY = "test-signature-key-0123456789abcdef"
    RATE_LIMIT = "1000 per minute"
    RANDOM_SEED = 1234
    MAIL_SENDER = "no-reply@stackhub.test"
    MAIL_TIMEOUT = 5.0
    STACK_SERIALIZE_WRITES = False


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture()
def app(mailer: RecordingMailer) -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig, mailer=mailer)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def make_user(app: Flask):
    """Persist a user directly and return its id."""

    def _make(
        email: str,
        password: str = DEFAULT_PASSWORD,
        *,
        name: str = "Tester",
        role: str = "client",
        verified: bool = True,
    ) -> str:
        with app.app_context():
            user = User(
                name=name, email=email, password=password, role=role, verified=verified
            )
            db.session.add(user)
            db.session.commit()
            return user.id

    return _make


@pytest.fixture()
def auth_headers(client: FlaskClient):
    """Sign in and return the Authorization header for the session."""

    def _headers(email: str, password: str = DEFAULT_PASSWORD) -> dict:
        response = client.post("/signin", json={"email": email, "password": password})
        assert response.status_code == 200, response.get_json()
        token = response.get_json()["data"]
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def pending_code(app: Flask):
    """Return the stored verification code for an email."""

    def _code(email: str) -> str:
        with app.app_context():
            record = EmailVerification.query.filter_by(email=email).one()
            return record.code

    return _code
