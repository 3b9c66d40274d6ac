"""Server-side project lifecycle management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any
from uuid import uuid4

from prox.db.store import SQLiteStore
from prox.models.project import Project, ProjectStatus

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND_MESSAGE = "Loyiha topilmadi"


class ProjectNotFoundError(LookupError):
    """Raised when a project id is unknown to the store."""

    def __init__(self, project_id: str) -> None:
        super().__init__(PROJECT_NOT_FOUND_MESSAGE)
        self.project_id = project_id


@dataclass(slots=True)
class CreateProjectInput:
    """Input payload for project creation."""

    title: str
    description: str
    technology: str
    deadline: date
    technologies: list[str] = field(default_factory=list)
    students_count: int = 1
    status: ProjectStatus = ProjectStatus.PLANNING
    progress_percent: int = 0
    url: str | None = None
    logo: str | None = None


class ProjectManager:
    """Manage stored projects.

    Updates are partial: fields missing from the change set keep their
    stored values.
    """

    def __init__(self, store: SQLiteStore) -> None:
        self._store = store

    async def create(self, payload: CreateProjectInput) -> Project:
        project = Project(
            id=str(uuid4()),
            title=payload.title,
            description=payload.description,
            technology=payload.technology,
            technologies=list(payload.technologies),
            students_count=payload.students_count,
            status=ProjectStatus(payload.status).value,
            progress_percent=payload.progress_percent,
            deadline=payload.deadline,
            url=payload.url,
            logo=payload.logo,
        )
        await self._store.upsert_project(project)
        logger.info("Stored new project %s", project.id)
        return project

    async def update(self, project_id: str, changes: dict[str, Any]) -> Project:
        current = await self._store.get_project(project_id)
        if current is None:
            raise ProjectNotFoundError(project_id)
        if isinstance(changes.get("status"), ProjectStatus):
            changes = {**changes, "status": changes["status"].value}
        project = Project.model_validate(current.model_dump() | changes)
        await self._store.upsert_project(project)
        logger.info("Updated stored project %s (%s)", project_id, ", ".join(sorted(changes)))
        return project

    async def list(self) -> list[Project]:
        return await self._store.list_projects()

    async def get(self, project_id: str) -> Project | None:
        return await self._store.get_project(project_id)

    async def delete(self, project_id: str) -> None:
        if not await self._store.delete_project(project_id):
            raise ProjectNotFoundError(project_id)
        logger.info("Deleted stored project %s", project_id)
