"""Projects page view-model."""

from __future__ import annotations

from dataclasses import dataclass

from prox.core.delete_confirmation import DeleteConfirmationController
from prox.core.display import (
    EMPTY_DESCRIPTION,
    StatusDisplay,
    fallback_glyph,
    resolve_logo,
    status_display,
)
from prox.core.modal import EditDraft, ModalController
from prox.core.project_list import ProjectListController
from prox.core.roles import CapabilityGate
from prox.core.session_store import SessionProvider
from prox.models.project import Project
from prox.services.projects import ProjectsService

CREATE_TITLE = "Yangi loyiha"
EDIT_TITLE = "Loyihani tahrirlash"
CREATE_LABEL = "Qo'shish"
EDIT_LABEL = "Saqlash"
SAVING_LABEL = "Saqlanmoqda..."


@dataclass(frozen=True, slots=True)
class ProjectCard:
    """One rendered project row."""

    project_id: str
    title: str
    description: str
    status: StatusDisplay
    logo: str | None
    glyph: str
    url: str | None
    can_edit: bool
    can_delete: bool
    confirming: bool


class ProjectsPage:
    """Compose the list, modal and delete controllers behind one page.

    Capabilities are recomputed from the session provider on every render.
    """

    def __init__(self, service: ProjectsService, sessions: SessionProvider) -> None:
        self._sessions = sessions
        self.projects = ProjectListController(service)
        self.modal = ModalController(service, self.projects)
        self.deletion = DeleteConfirmationController(service, self.projects)

    @property
    def gate(self) -> CapabilityGate:
        return CapabilityGate.from_session(self._sessions.get())

    @property
    def can_create(self) -> bool:
        return self.gate.can_create

    @property
    def count(self) -> int:
        return len(self.projects.projects)

    async def open(self) -> None:
        await self.projects.load()

    def open_create(self) -> bool:
        if not self.gate.can_create:
            return False
        self.modal.open_create()
        return True

    def open_edit(self, project_id: str) -> bool:
        project = self.projects.get(project_id)
        if project is None or not self.gate.can_edit:
            return False
        self.modal.open_edit(project)
        return True

    def request_delete(self, project_id: str) -> bool:
        if self.projects.get(project_id) is None or not self.gate.can_delete:
            return False
        self.deletion.request_delete(project_id)
        return True

    def cards(self) -> list[ProjectCard]:
        gate = self.gate
        return [self._card(project, gate) for project in self.projects.projects]

    def modal_title(self) -> str | None:
        if not self.modal.is_open:
            return None
        return EDIT_TITLE if isinstance(self.modal.state, EditDraft) else CREATE_TITLE

    def submit_label(self) -> str | None:
        if not self.modal.is_open:
            return None
        if self.modal.saving:
            return SAVING_LABEL
        return EDIT_LABEL if isinstance(self.modal.state, EditDraft) else CREATE_LABEL

    def _card(self, project: Project, gate: CapabilityGate) -> ProjectCard:
        return ProjectCard(
            project_id=project.id,
            title=project.title,
            description=project.description or EMPTY_DESCRIPTION,
            status=status_display(project.status),
            logo=resolve_logo(project),
            glyph=fallback_glyph(project.title),
            url=project.url or None,
            can_edit=gate.can_edit,
            can_delete=gate.can_delete,
            confirming=self.deletion.is_armed(project.id),
        )
