"""Project API schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from prox.models.project import ProjectStatus


class CreateProjectRequest(BaseModel):
    """Payload for creating a project."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    technology: str = Field(min_length=1)
    technologies: list[str] = Field(default_factory=list)
    students_count: int = Field(default=1, ge=0, alias="students")
    status: ProjectStatus = ProjectStatus.PLANNING
    progress_percent: int = Field(default=0, alias="progress")
    deadline: date
    url: str | None = None
    logo: str | None = None


class UpdateProjectRequest(BaseModel):
    """Partial payload for updating a project; omitted fields are left as stored."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    technology: str | None = Field(default=None, min_length=1)
    technologies: list[str] | None = None
    students_count: int | None = Field(default=None, ge=0, alias="students")
    status: ProjectStatus | None = None
    progress_percent: int | None = Field(default=None, alias="progress")
    deadline: date | None = None
    url: str | None = None
    logo: str | None = None
