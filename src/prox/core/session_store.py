"""Session providers backed by a key-value store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from prox.models.session import Session

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class SessionProvider(Protocol):
    """Injected access to the stored session."""

    def get(self) -> Session | None:
        """Return the stored session, or `None` when nothing is stored."""

    def set(self, session: Session) -> None:
        """Store a session, replacing any previous one."""

    def clear(self) -> None:
        """Remove the stored credentials."""


def session_from_values(values: dict[str, str]) -> Session | None:
    """Decode stored `token` and serialized `user` entries.

    A missing or malformed `user` entry yields a session without a role.
    """
    token = values.get(TOKEN_KEY) or None
    raw_user = values.get(USER_KEY)
    if token is None and raw_user is None:
        return None
    role: str | None = None
    if raw_user:
        try:
            user = json.loads(raw_user)
        except ValueError:
            logger.warning("Ignoring malformed stored user entry")
            user = None
        if isinstance(user, dict):
            try:
                role = Session.model_validate({"role": user.get("role")}).role
            except ValidationError:
                role = None
    return Session(token=token, role=role)


def session_to_values(session: Session) -> dict[str, str]:
    values = {USER_KEY: json.dumps({"role": session.role})}
    if session.token:
        values[TOKEN_KEY] = session.token
    return values


class InMemorySessionProvider:
    """Session provider over a plain dict, for tests and embedding."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    @classmethod
    def with_role(cls, role: str | None, *, token: str = "token") -> InMemorySessionProvider:
        provider = cls()
        provider.set(Session(token=token, role=role))
        return provider

    @property
    def values(self) -> dict[str, str]:
        return dict(self._values)

    def get(self) -> Session | None:
        return session_from_values(self._values)

    def set(self, session: Session) -> None:
        self._values.pop(TOKEN_KEY, None)
        self._values.update(session_to_values(session))

    def clear(self) -> None:
        self._values.pop(TOKEN_KEY, None)
        self._values.pop(USER_KEY, None)


class JSONFileSessionProvider:
    """Session provider persisted as a JSON object of string entries."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self) -> Session | None:
        return session_from_values(self._read())

    def set(self, session: Session) -> None:
        values = self._read()
        values.pop(TOKEN_KEY, None)
        values.update(session_to_values(session))
        self._write(values)

    def clear(self) -> None:
        values = self._read()
        values.pop(TOKEN_KEY, None)
        values.pop(USER_KEY, None)
        self._write(values)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Ignoring malformed session file %s", self._path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _write(self, values: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(values, indent=2), encoding="utf-8")
