"""Session and capability models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Capability(StrEnum):
    """Closed capability tag derived from the caller's session."""

    ANONYMOUS = "anonymous"
    STUDENT = "student"
    STAFF = "staff"


class Session(BaseModel):
    """Read-only view of the stored credentials."""

    token: str | None = None
    role: str | None = None

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token) or bool(self.role)
