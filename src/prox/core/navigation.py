"""Role-gated sidebar navigation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from prox.config import DEFAULT_MOBILE_BREAKPOINT
from prox.core.roles import classify
from prox.core.routing import LOGIN_PATH, Router
from prox.core.session_store import SessionProvider
from prox.models.session import Capability

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MenuItem:
    """One sidebar destination."""

    path: str
    label: str
    icon: str


@dataclass(frozen=True, slots=True)
class NavigationEntry:
    """Menu item as rendered for the current route."""

    item: MenuItem
    active: bool


ANONYMOUS_MENU: tuple[MenuItem, ...] = (
    MenuItem(path="/", label="Bosh sahifa", icon="home"),
    MenuItem(path="/students", label="O'quvchilar", icon="graduation-cap"),
    MenuItem(path="/debtors", label="Qarzdorlar", icon="wallet"),
    MenuItem(path="/projects", label="Loyihalar", icon="folder-open"),
    MenuItem(path="/login", label="Kirish", icon="user"),
)

STUDENT_MENU: tuple[MenuItem, ...] = (
    MenuItem(path="/", label="Bosh sahifa", icon="home"),
    MenuItem(path="/tasks", label="Qadamlar", icon="file-text"),
    MenuItem(path="/students", label="O'quvchilar", icon="graduation-cap"),
    MenuItem(path="/debtors", label="Qarzdorlar", icon="wallet"),
    MenuItem(path="/projects", label="Loyihalar", icon="folder-open"),
    MenuItem(path="/profile", label="Profilim", icon="user"),
)

STAFF_MENU: tuple[MenuItem, ...] = (
    MenuItem(path="/dashboard", label="Dashboard", icon="layout-dashboard"),
    MenuItem(path="/students", label="O'quvchilar", icon="graduation-cap"),
    MenuItem(path="/debtors", label="Qarzdorlar", icon="wallet"),
    MenuItem(path="/student-steps", label="Qadamlar nazorati", icon="trophy"),
    MenuItem(path="/projects", label="Loyihalar", icon="folder-open"),
    MenuItem(path="/tasks", label="Vazifalar", icon="file-text"),
)


def select_menu(is_logged_in: bool, capability: Capability) -> tuple[MenuItem, ...]:
    if not is_logged_in:
        return ANONYMOUS_MENU
    if capability is Capability.STUDENT:
        return STUDENT_MENU
    return STAFF_MENU


def mark_active(menu: tuple[MenuItem, ...], current_path: str) -> list[NavigationEntry]:
    """Flag the item whose path equals the current path exactly."""
    return [NavigationEntry(item=item, active=item.path == current_path) for item in menu]


class NavigationGate:
    """Sidebar state: menu selection, mobile drawer and logout."""

    def __init__(
        self,
        sessions: SessionProvider,
        router: Router,
        *,
        on_reset: Callable[[], None] | None = None,
        mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT,
    ) -> None:
        self._sessions = sessions
        self._router = router
        self._on_reset = on_reset
        self._mobile_breakpoint = mobile_breakpoint
        self._mobile_open = False

    @property
    def mobile_open(self) -> bool:
        return self._mobile_open

    @property
    def is_logged_in(self) -> bool:
        session = self._sessions.get()
        return session is not None and session.is_logged_in

    @property
    def can_logout(self) -> bool:
        return self.is_logged_in

    @property
    def capability(self) -> Capability:
        return classify(self._sessions.get())

    def menu(self) -> tuple[MenuItem, ...]:
        return select_menu(self.is_logged_in, self.capability)

    def entries(self) -> list[NavigationEntry]:
        return mark_active(self.menu(), self._router.current_path)

    def open_mobile(self) -> None:
        self._mobile_open = True

    def close_mobile(self) -> None:
        self._mobile_open = False

    def select(self, path: str, *, viewport_width: int | None = None) -> None:
        self._router.navigate(path)
        if viewport_width is not None and viewport_width < self._mobile_breakpoint:
            self.close_mobile()

    def logout(self) -> bool:
        """Clear credentials, go to login, then request a full application reset.

        The reset is a hard reinitialization performed by the composition
        root; no controller state survives it. A no-op returning `False`
        when nobody is logged in.
        """
        if not self.can_logout:
            return False
        self._sessions.clear()
        self._router.navigate(LOGIN_PATH)
        logger.info("Session cleared; reinitializing application state")
        if self._on_reset is not None:
            self._on_reset()
        return True
