from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from prox.api.app import create_app
from prox.api.deps import get_project_manager
from prox.core.modal import Closed
from prox.core.project_list import ListPhase
from prox.core.project_manager import ProjectManager
from prox.core.routing import InMemoryRouter
from prox.core.session_store import InMemorySessionProvider
from prox.core.shell import DashboardShell
from prox.db.store import SQLiteStore
from prox.services.projects import HTTPProjectsService


def _shell(tmp_path: Path, role: str) -> DashboardShell:
    app = create_app()
    app.dependency_overrides[get_project_manager] = lambda: ProjectManager(
        SQLiteStore(tmp_path / "prox.db")
    )
    service = HTTPProjectsService("http://prox.test", transport=httpx.ASGITransport(app=app))
    return DashboardShell(
        service,
        InMemorySessionProvider.with_role(role),
        InMemoryRouter("/projects"),
    )


@pytest.mark.asyncio
async def test_staff_creates_edits_and_deletes_a_project(tmp_path: Path) -> None:
    shell = _shell(tmp_path, "mentor")
    page = shell.page
    await page.open()
    assert page.projects.phase is ListPhase.LOADED
    assert page.count == 0

    assert page.open_create()
    for key, value in {
        "title": "Alochi",
        "description": "Baholar tizimi",
        "technology": "React",
        "technologies": "React, Node",
        "deadline": "2025-11-30",
        "url": "",
    }.items():
        page.modal.update_field(key, value)
    assert await page.modal.save() is True
    assert isinstance(page.modal.state, Closed)

    [card] = page.cards()
    assert card.logo == "/loyihalar/alochi.jpg"
    assert card.status.label == "Rejada"
    assert card.url is None

    assert page.open_edit(card.project_id)
    page.modal.update_field("status", "active")
    assert await page.modal.save() is True
    assert page.cards()[0].status.label == "Faol"
    assert page.projects.projects[0].technologies == ["React", "Node"]

    assert page.request_delete(card.project_id)
    assert await page.deletion.confirm(card.project_id) is True
    assert page.cards() == []


@pytest.mark.asyncio
async def test_rejected_save_keeps_draft_and_server_message(tmp_path: Path) -> None:
    shell = _shell(tmp_path, "admin")
    page = shell.page
    await page.open()
    assert page.open_create()
    for key, value in {
        "title": "Prox",
        "description": "Academy",
        "technology": "Vue",
        "deadline": "not-a-date",
    }.items():
        page.modal.update_field(key, value)

    assert await page.modal.save() is False

    assert page.modal.is_open
    assert page.modal.draft is not None
    assert page.modal.draft.deadline == "not-a-date"
    assert page.modal.error is not None
    assert "deadline" in page.modal.error
    assert page.count == 0
