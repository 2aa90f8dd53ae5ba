"""User model definition."""

from utils.ids import new_id

from . import db


USER_ROLES = ("client", "admin")


class User(db.Model):
    """Represents an account holder.

    Passwords are stored and compared verbatim; there is no hashing.
    """

    __tablename__ = "users"

    id = db.Column(db.String(26), primary_key=True, default=new_id)
    name = db.Column(db.String(128), nullable=False)
    role = db.Column(db.String(32), nullable=False, default="client")
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    verified = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )

    def check_password(self, password: str) -> bool:
        """Compare a submitted password against the stored one."""

        return self.password == password

    def to_dict(self) -> dict:
        """Serialize the public view of the user."""

        return {"id": self.id, "name": self.name}

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
