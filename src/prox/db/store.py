"""Async SQLite persistence for project records."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime
from pathlib import Path

import aiosqlite

from prox.db.migrations import apply_migrations
from prox.models.project import Project


class SQLiteStore:
    """Data access layer for projects."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        conn = await aiosqlite.connect(self._db_path)
        conn.row_factory = aiosqlite.Row
        try:
            await apply_migrations(conn)
            yield conn
        finally:
            await conn.close()

    async def upsert_project(self, project: Project) -> None:
        now = datetime.now(UTC).isoformat()
        async with self.connection() as conn:
            await conn.execute(
                """
                INSERT INTO projects(
                    id,
                    title,
                    description,
                    technology,
                    technologies,
                    students,
                    status,
                    progress,
                    deadline,
                    url,
                    logo,
                    created_at,
                    updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title=excluded.title,
                    description=excluded.description,
                    technology=excluded.technology,
                    technologies=excluded.technologies,
                    students=excluded.students,
                    status=excluded.status,
                    progress=excluded.progress,
                    deadline=excluded.deadline,
                    url=excluded.url,
                    logo=excluded.logo,
                    updated_at=excluded.updated_at
                """,
                (
                    project.id,
                    project.title,
                    project.description,
                    project.technology,
                    json.dumps(project.technologies),
                    project.students_count,
                    project.status,
                    project.progress_percent,
                    project.deadline.isoformat() if project.deadline else None,
                    project.url,
                    project.logo,
                    now,
                    now,
                ),
            )
            await conn.commit()

    async def list_projects(self) -> list[Project]:
        async with self.connection() as conn:
            cursor = await conn.execute("SELECT * FROM projects ORDER BY created_at ASC, rowid ASC")
            rows = await cursor.fetchall()
        return [self._project_from_row(row) for row in rows]

    async def get_project(self, project_id: str) -> Project | None:
        async with self.connection() as conn:
            cursor = await conn.execute("SELECT * FROM projects WHERE id = ?", (project_id,))
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._project_from_row(row)

    async def delete_project(self, project_id: str) -> bool:
        async with self.connection() as conn:
            cursor = await conn.execute("DELETE FROM projects WHERE id = ?", (project_id,))
            await conn.commit()
            return cursor.rowcount > 0

    @staticmethod
    def _project_from_row(row: aiosqlite.Row) -> Project:
        return Project(
            id=str(row["id"]),
            title=str(row["title"]),
            description=str(row["description"]),
            technology=str(row["technology"]),
            technologies=json.loads(str(row["technologies"])),
            students_count=int(row["students"]),
            status=str(row["status"]),
            progress_percent=int(row["progress"]),
            deadline=date.fromisoformat(str(row["deadline"])) if row["deadline"] else None,
            url=str(row["url"]) if row["url"] else None,
            logo=str(row["logo"]) if row["logo"] else None,
        )
