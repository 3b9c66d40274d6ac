"""Create/edit modal state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, TypeAlias

from prox.core.drafts import Draft, empty_draft, is_saveable, to_draft, to_payload, update_draft
from prox.core.project_list import ProjectListController
from prox.models.project import Project
from prox.services.projects import SAVE_ERROR_MESSAGE, ProjectsService, ProjectsServiceError

logger = logging.getLogger(__name__)


class ModalClosedError(RuntimeError):
    """Raised when a draft operation is attempted while the modal is closed."""


@dataclass(frozen=True, slots=True)
class Closed:
    """No draft is open."""


@dataclass(frozen=True, slots=True)
class CreateDraft:
    """A new project is being drafted."""

    draft: Draft
    saving: bool = False
    error: str | None = None


@dataclass(frozen=True, slots=True)
class EditDraft:
    """An existing project is being edited."""

    project_id: str
    draft: Draft
    saving: bool = False
    error: str | None = None


ModalState: TypeAlias = Closed | CreateDraft | EditDraft
OpenModalState: TypeAlias = CreateDraft | EditDraft

CLOSED = Closed()


class ModalController:
    """Drive the single create/edit modal of the projects page.

    Opening while open replaces the current draft.
    """

    def __init__(self, service: ProjectsService, projects: ProjectListController) -> None:
        self._service = service
        self._projects = projects
        self._state: ModalState = CLOSED
        self._opened = 0

    @property
    def state(self) -> ModalState:
        return self._state

    @property
    def is_open(self) -> bool:
        return not isinstance(self._state, Closed)

    @property
    def draft(self) -> Draft | None:
        if isinstance(self._state, Closed):
            return None
        return self._state.draft

    @property
    def saving(self) -> bool:
        return not isinstance(self._state, Closed) and self._state.saving

    @property
    def error(self) -> str | None:
        if isinstance(self._state, Closed):
            return None
        return self._state.error

    @property
    def can_save(self) -> bool:
        state = self._state
        return not isinstance(state, Closed) and not state.saving and is_saveable(state.draft)

    def open_create(self) -> None:
        self._opened += 1
        self._state = CreateDraft(draft=empty_draft())

    def open_edit(self, project: Project) -> None:
        self._opened += 1
        self._state = EditDraft(project_id=project.id, draft=to_draft(project))

    def update_field(self, key: str, value: Any) -> None:
        state = self._open_state()
        self._state = replace(state, draft=update_draft(state.draft, key, value))

    def cancel(self) -> None:
        self._opened += 1
        self._state = CLOSED

    def close(self) -> None:
        self.cancel()

    async def save(self) -> bool:
        """Persist the open draft.

        Returns `True` once the project is saved and the list reloaded. Returns
        `False` without calling the service when closed, already saving, or
        the draft is not saveable; and after a failed service call, leaving
        the draft in place with the error message.
        """
        state = self._state
        if isinstance(state, Closed) or state.saving or not is_saveable(state.draft):
            return False

        opened = self._opened
        self._state = replace(state, saving=True, error=None)
        payload = to_payload(state.draft)
        try:
            if isinstance(state, EditDraft):
                await self._service.update(state.project_id, payload)
                logger.info("Updated project %s", state.project_id)
            else:
                project = await self._service.create(payload)
                logger.info("Created project %s", project.id)
        except ProjectsServiceError as exc:
            logger.warning("Saving project failed: %s", exc)
            current = self._state
            if self._opened == opened and not isinstance(current, Closed):
                self._state = replace(
                    current, saving=False, error=exc.display_message(SAVE_ERROR_MESSAGE)
                )
            return False

        # A draft opened or cancelled while the request was in flight is left alone.
        if self._opened == opened:
            self._opened += 1
            self._state = CLOSED
        await self._projects.reload()
        return True

    def _open_state(self) -> OpenModalState:
        state = self._state
        if isinstance(state, Closed):
            msg = "No draft is open"
            raise ModalClosedError(msg)
        return state
