"""Shared API dependency providers."""

from __future__ import annotations

from prox.config import DashboardSettings
from prox.core.project_manager import ProjectManager
from prox.db.store import SQLiteStore

_SETTINGS = DashboardSettings.from_env()


def get_settings() -> DashboardSettings:
    return _SETTINGS


def get_store() -> SQLiteStore:
    db_path = get_settings().db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return SQLiteStore(db_path=db_path)


def get_project_manager() -> ProjectManager:
    return ProjectManager(store=get_store())
