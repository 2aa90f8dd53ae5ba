"""Caller identity passed from the bearer-token gate to handlers."""

from __future__ import annotations

from dataclasses import dataclass

ROLE_CLIENT = "client"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class Identity:
    id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
