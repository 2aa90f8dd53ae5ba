"""Tests for the User model helpers."""

from models import db
from models.user import User


def test_new_user_defaults(app):
    with app.app_context():
        user = User(name="Helper", email="helper@example.com", password="password123")
        db.session.add(user)
        db.session.commit()

        assert len(user.id) == 26
        assert user.role == "client"
        assert user.verified is False


def test_password_is_compared_verbatim(app):
    with app.app_context():
        user = User(name="Helper", email="helper@example.com", password="password123")

        assert user.check_password("password123") is True
        assert user.check_password("PASSWORD123") is False


def test_public_view_hides_credentials(app):
    with app.app_context():
        user = User(name="Helper", email="helper@example.com", password="password123")
        db.session.add(user)
        db.session.commit()

        assert user.to_dict() == {"id": user.id, "name": "Helper"}


def test_ids_are_time_ordered(app):
    with app.app_context():
        first = User(name="A", email="a@example.com", password="password123")
        db.session.add(first)
        db.session.commit()
        second = User(name="B", email="b@example.com", password="password123")
        db.session.add(second)
        db.session.commit()

        assert first.id != second.id
        assert first.id[:10] <= second.id[:10]
