"""Project domain models."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectStatus(str, Enum):
    """Lifecycle status for a platform project."""

    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"


def _date_portion(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if "T" in value:
            return value.split("T", 1)[0]
    return value


class Project(BaseModel):
    """Persisted project record as returned by the projects service.

    `status` stays a plain string so that values outside `ProjectStatus`
    survive parsing and are resolved at display time.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    description: str = ""
    technology: str = ""
    technologies: list[str] = Field(default_factory=list)
    students_count: int = Field(default=0, alias="students")
    status: str = ProjectStatus.PLANNING.value
    progress_percent: int = Field(default=0, alias="progress")
    deadline: date | None = None
    url: str | None = None
    logo: str | None = None

    @field_validator("deadline", mode="before")
    @classmethod
    def _truncate_deadline(cls, value: Any) -> Any:
        return _date_portion(value)


class ProjectPayload(BaseModel):
    """Create/update body sent to the projects service (no id)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    technology: str
    technologies: list[str] = Field(default_factory=list)
    students_count: int = Field(default=1, alias="students")
    status: str = ProjectStatus.PLANNING.value
    progress_percent: int = Field(default=0, alias="progress")
    deadline: str
    url: str | None = None
    logo: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize by wire alias; absent `url`/`logo` are omitted entirely."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
