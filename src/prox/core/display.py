"""Display heuristics for project cards."""

from __future__ import annotations

from dataclasses import dataclass

from prox.models.project import Project, ProjectStatus

ASSETS_ROOT = "/loyihalar"
DEFAULT_GLYPH = "P"
EMPTY_DESCRIPTION = "Ma'lumot yo'q"


@dataclass(frozen=True, slots=True)
class StatusDisplay:
    """Label and style token for a project status badge."""

    label: str
    style_token: str


UNKNOWN_STATUS = StatusDisplay(label="Noma'lum", style_token="slate")

_STATUS_DISPLAYS: dict[str, StatusDisplay] = {
    ProjectStatus.ACTIVE.value: StatusDisplay(label="Faol", style_token="emerald"),
    ProjectStatus.COMPLETED.value: StatusDisplay(label="Tugallangan", style_token="violet"),
    ProjectStatus.PLANNING.value: StatusDisplay(label="Rejada", style_token="amber"),
}

# Order matters: the first keyword found in the title wins.
LOGO_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("bolajon", f"{ASSETS_ROOT}/bolajon.png"),
    ("alochi", f"{ASSETS_ROOT}/alochi.jpg"),
    ("mental", f"{ASSETS_ROOT}/Mentaljon.png"),
    ("prox", f"{ASSETS_ROOT}/prox.jpg"),
    ("mukammal", f"{ASSETS_ROOT}/mukammalotaona.png"),
    ("alibobo", f"{ASSETS_ROOT}/alibobo.png"),
    ("avtofix", f"{ASSETS_ROOT}/avtofix.webp"),
    ("avtojon", f"{ASSETS_ROOT}/avtojon.png"),
)


def status_display(status: str | ProjectStatus | None) -> StatusDisplay:
    if isinstance(status, ProjectStatus):
        status = status.value
    if status is None:
        return UNKNOWN_STATUS
    return _STATUS_DISPLAYS.get(status, UNKNOWN_STATUS)


def resolve_logo(project: Project) -> str | None:
    """Return the explicit logo, else the first keyword asset matching the title."""
    if project.logo:
        return project.logo
    title = (project.title or "").lower()
    for keyword, asset_path in LOGO_KEYWORDS:
        if keyword in title:
            return asset_path
    return None


def fallback_glyph(title: str | None) -> str:
    if not title:
        return DEFAULT_GLYPH
    return title[0].upper()
