"""Routing collaborator."""

from __future__ import annotations

from typing import Protocol

HOME_PATH = "/"
LOGIN_PATH = "/login"


class Router(Protocol):
    """Current location plus navigation."""

    @property
    def current_path(self) -> str:
        """Path of the active route."""

    def navigate(self, path: str) -> None:
        """Move to `path`."""


class InMemoryRouter:
    """Router that records visited paths."""

    def __init__(self, path: str = HOME_PATH) -> None:
        self._history = [path]

    @property
    def current_path(self) -> str:
        return self._history[-1]

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def navigate(self, path: str) -> None:
        self._history.append(path)
