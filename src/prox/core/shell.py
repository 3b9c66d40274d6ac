"""Dashboard composition root."""

from __future__ import annotations

import logging

from prox.config import DEFAULT_MOBILE_BREAKPOINT, DashboardSettings
from prox.core.navigation import NavigationGate
from prox.core.page import ProjectsPage
from prox.core.routing import InMemoryRouter, Router
from prox.core.session_store import JSONFileSessionProvider, SessionProvider
from prox.services.projects import HTTPProjectsService, ProjectsService

logger = logging.getLogger(__name__)


class DashboardShell:
    """Own the collaborators and build every view controller.

    `reinitialize()` is the hard reset triggered by logout: all page and
    navigation state is discarded and rebuilt from the collaborators.
    """

    def __init__(
        self,
        service: ProjectsService,
        sessions: SessionProvider,
        router: Router,
        *,
        mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT,
    ) -> None:
        self._service = service
        self._sessions = sessions
        self._router = router
        self._mobile_breakpoint = mobile_breakpoint
        self._generation = 0
        self.page, self.navigation = self._build()

    @classmethod
    def from_settings(cls, settings: DashboardSettings) -> DashboardShell:
        return cls(
            service=HTTPProjectsService(
                settings.api_base_url, timeout_seconds=settings.request_timeout_seconds
            ),
            sessions=JSONFileSessionProvider(settings.session_path),
            router=InMemoryRouter(),
            mobile_breakpoint=settings.mobile_breakpoint,
        )

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def sessions(self) -> SessionProvider:
        return self._sessions

    @property
    def router(self) -> Router:
        return self._router

    def reinitialize(self) -> None:
        self._generation += 1
        logger.info("Reinitializing dashboard state (generation %s)", self._generation)
        self.page, self.navigation = self._build()

    def _build(self) -> tuple[ProjectsPage, NavigationGate]:
        page = ProjectsPage(self._service, self._sessions)
        navigation = NavigationGate(
            self._sessions,
            self._router,
            on_reset=self.reinitialize,
            mobile_breakpoint=self._mobile_breakpoint,
        )
        return page, navigation
