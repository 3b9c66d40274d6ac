from datetime import date
from pathlib import Path

import pytest

from prox.core.project_manager import CreateProjectInput, ProjectManager, ProjectNotFoundError
from prox.db.store import SQLiteStore
from prox.models.project import ProjectStatus


def _input(**overrides: object) -> CreateProjectInput:
    values: dict[str, object] = {
        "title": "Avtojon",
        "description": "Avto servis",
        "technology": "Flutter",
        "deadline": date(2025, 10, 1),
        "url": "https://avtojon.uz",
    }
    values.update(overrides)
    return CreateProjectInput(**values)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_project_manager_create_and_list(tmp_path: Path) -> None:
    manager = ProjectManager(SQLiteStore(tmp_path / "prox.db"))
    created = await manager.create(_input(status=ProjectStatus.ACTIVE))

    projects = await manager.list()
    assert len(projects) == 1
    assert projects[0].id == created.id
    assert projects[0].status == "active"


@pytest.mark.asyncio
async def test_project_manager_partial_update_keeps_absent_fields(tmp_path: Path) -> None:
    manager = ProjectManager(SQLiteStore(tmp_path / "prox.db"))
    created = await manager.create(_input(logo="/loyihalar/avtojon.png"))

    updated = await manager.update(
        created.id, {"title": "Avtojon 2", "status": ProjectStatus.COMPLETED}
    )

    assert updated.title == "Avtojon 2"
    assert updated.status == "completed"
    assert updated.url == "https://avtojon.uz"
    assert updated.logo == "/loyihalar/avtojon.png"
    assert await manager.get(created.id) == updated


@pytest.mark.asyncio
async def test_project_manager_unknown_id(tmp_path: Path) -> None:
    manager = ProjectManager(SQLiteStore(tmp_path / "prox.db"))

    with pytest.raises(ProjectNotFoundError):
        await manager.update("missing", {"title": "x"})
    with pytest.raises(ProjectNotFoundError):
        await manager.delete("missing")
