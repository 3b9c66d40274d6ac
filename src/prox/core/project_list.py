"""Loaded project collection and its load state."""

from __future__ import annotations

import logging
from enum import StrEnum

from prox.models.project import Project
from prox.services.projects import FETCH_ERROR_MESSAGE, ProjectsService, ProjectsServiceError

logger = logging.getLogger(__name__)


class ListPhase(StrEnum):
    """Load state of the project collection."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class ProjectListController:
    """Hold the project collection as last returned by the service.

    Overlapping `load()` calls are not fenced: whichever response resolves
    last replaces the collection.
    """

    def __init__(self, service: ProjectsService) -> None:
        self._service = service
        self._phase = ListPhase.IDLE
        self._projects: tuple[Project, ...] = ()
        self._error: str | None = None

    @property
    def phase(self) -> ListPhase:
        return self._phase

    @property
    def loading(self) -> bool:
        return self._phase is ListPhase.LOADING

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    @property
    def error(self) -> str | None:
        return self._error

    async def load(self) -> None:
        self._phase = ListPhase.LOADING
        try:
            projects = await self._service.list()
        except ProjectsServiceError as exc:
            logger.warning("Loading projects failed: %s", exc)
            self._projects = ()
            self._error = exc.display_message(FETCH_ERROR_MESSAGE)
            self._phase = ListPhase.ERROR
            return
        self._projects = tuple(projects)
        self._error = None
        self._phase = ListPhase.LOADED

    async def reload(self) -> None:
        await self.load()

    async def retry(self) -> None:
        self._error = None
        await self.load()

    def get(self, project_id: str) -> Project | None:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None
