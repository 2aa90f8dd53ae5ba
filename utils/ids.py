"""Identifier generation."""

import ulid


def new_id() -> str:
    """Return a new globally unique, time-ordered identifier."""

    return str(ulid.new())
