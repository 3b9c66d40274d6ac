"""Single-slot delete confirmation."""

from __future__ import annotations

import logging

from prox.core.project_list import ProjectListController
from prox.services.projects import DELETE_ERROR_MESSAGE, ProjectsService, ProjectsServiceError

logger = logging.getLogger(__name__)


class DeleteConfirmationController:
    """Track the one project awaiting delete confirmation.

    Arming a second id silently disarms the first. A failed delete also
    disarms, so the user re-selects the row before retrying.
    """

    def __init__(self, service: ProjectsService, projects: ProjectListController) -> None:
        self._service = service
        self._projects = projects
        self._armed: str | None = None
        self._deleting = False
        self._error: str | None = None

    @property
    def armed(self) -> str | None:
        return self._armed

    @property
    def deleting(self) -> bool:
        return self._deleting

    @property
    def error(self) -> str | None:
        return self._error

    def is_armed(self, project_id: str) -> bool:
        return self._armed == project_id

    def request_delete(self, project_id: str) -> None:
        self._armed = project_id
        self._error = None

    def cancel_confirm(self) -> None:
        self._armed = None

    async def confirm(self, project_id: str) -> bool:
        """Delete the armed project and reload the list.

        A no-op returning `False` unless `project_id` is the armed id and no
        delete is already in flight.
        """
        if self._deleting or self._armed is None or self._armed != project_id:
            return False

        self._deleting = True
        try:
            await self._service.delete(project_id)
        except ProjectsServiceError as exc:
            logger.warning("Deleting project %s failed: %s", project_id, exc)
            self._error = exc.display_message(DELETE_ERROR_MESSAGE)
            if self._armed == project_id:
                self._armed = None
            return False
        finally:
            self._deleting = False

        logger.info("Deleted project %s", project_id)
        if self._armed == project_id:
            self._armed = None
        self._error = None
        await self._projects.reload()
        return True
