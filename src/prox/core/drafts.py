"""Editable project drafts and their codec."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from prox.models.project import Project, ProjectPayload, ProjectStatus

TECHNOLOGIES_SEPARATOR = ", "
_REQUIRED_FIELDS = ("title", "description", "technology", "deadline")
_INT_FIELDS = frozenset({"students_count", "progress_percent"})


@dataclass(frozen=True, slots=True)
class Draft:
    """Input-shaped copy of a project under edit."""

    title: str = ""
    description: str = ""
    technology: str = ""
    technologies: str = ""
    students_count: int = 1
    status: str = ProjectStatus.PLANNING.value
    progress_percent: int = 0
    deadline: str = ""
    url: str = ""
    logo: str = ""


DRAFT_FIELDS = frozenset(field.name for field in fields(Draft))


def empty_draft() -> Draft:
    return Draft()


def to_draft(project: Project) -> Draft:
    """Build an edit draft from a persisted project."""
    return Draft(
        title=project.title or "",
        description=project.description or "",
        technology=project.technology or "",
        technologies=TECHNOLOGIES_SEPARATOR.join(project.technologies),
        students_count=project.students_count,
        status=project.status or ProjectStatus.PLANNING.value,
        progress_percent=project.progress_percent,
        deadline=project.deadline.isoformat() if project.deadline else "",
        url=project.url or "",
        logo=project.logo or "",
    )


def split_technologies(text: str) -> list[str]:
    if not text:
        return []
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def to_payload(draft: Draft) -> ProjectPayload:
    """Build the service payload; empty `url`/`logo` become absent, not `""`."""
    return ProjectPayload(
        title=draft.title,
        description=draft.description,
        technology=draft.technology,
        technologies=split_technologies(draft.technologies),
        students_count=draft.students_count,
        status=draft.status,
        progress_percent=draft.progress_percent,
        deadline=draft.deadline,
        url=draft.url or None,
        logo=draft.logo or None,
    )


def is_saveable(draft: Draft) -> bool:
    return all(getattr(draft, name) for name in _REQUIRED_FIELDS)


def update_draft(draft: Draft, key: str, value: Any) -> Draft:
    """Return a copy of `draft` with one field replaced.

    Numeric fields are coerced here, at the input boundary: blank input is
    zero, decimals are truncated, and a negative student count is clamped to
    zero. Non-numeric input leaves the draft unchanged.
    """
    if key not in DRAFT_FIELDS:
        raise KeyError(f"Unknown draft field: {key}")
    if key in _INT_FIELDS:
        number = _coerce_int(value)
        if number is None:
            return draft
        value = number
        if key == "students_count":
            value = max(0, value)
    elif value is None:
        value = ""
    return replace(draft, **{key: value})


def _coerce_int(value: Any) -> int | None:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None
