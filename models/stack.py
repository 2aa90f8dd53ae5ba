"""Stack model definition."""

from utils.ids import new_id

from . import db


class Stack(db.Model):
    """A LIFO list of named items belonging to one user.

    ``owner`` holds a user id but carries no foreign key: deleting a user
    leaves their stacks in place.
    """

    __tablename__ = "stacks"

    id = db.Column(db.String(26), primary_key=True, default=new_id)
    owner = db.Column(db.String(26), nullable=False, index=True)
    items = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "owner": self.owner,
            "items": [dict(item) for item in self.items or []],
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Stack id={self.id} owner={self.owner} size={len(self.items or [])}>"
