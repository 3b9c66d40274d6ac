"""Projects service boundary and its HTTP client."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from prox.models.project import Project, ProjectPayload

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Xatolik"
SAVE_ERROR_MESSAGE = "Saqlashda xatolik"
DELETE_ERROR_MESSAGE = "O'chirishda xatolik"


class ProjectsServiceError(RuntimeError):
    """Failure reported by the projects service.

    `message` is the service-provided human-readable text, when there is one.
    """

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message or "projects service request failed")
        self.message = message
        self.status_code = status_code

    def display_message(self, fallback: str) -> str:
        return self.message or fallback


class ProjectsService(Protocol):
    """Persistence collaborator for project records."""

    async def list(self) -> list[Project]:
        """Return every project in service order."""

    async def create(self, payload: ProjectPayload) -> Project:
        """Persist a new project and return the stored record."""

    async def update(self, project_id: str, payload: ProjectPayload) -> Project:
        """Apply the payload to an existing project."""

    async def delete(self, project_id: str) -> None:
        """Remove one project."""


class HTTPProjectsService:
    """`ProjectsService` over the projects REST API."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._headers = dict(headers or {})

    async def list(self) -> list[Project]:
        data = await self._request("GET", "")
        if isinstance(data, dict):
            data = data.get("items", [])
        if not isinstance(data, list):
            raise ProjectsServiceError()
        return [self._parse_project(item) for item in data]

    async def create(self, payload: ProjectPayload) -> Project:
        data = await self._request("POST", "", json=payload.to_wire())
        return self._parse_project(data)

    async def update(self, project_id: str, payload: ProjectPayload) -> Project:
        data = await self._request("PUT", f"/{project_id}", json=payload.to_wire())
        return self._parse_project(data)

    async def delete(self, project_id: str) -> None:
        await self._request("DELETE", f"/{project_id}")

    async def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        url = f"{self._base_url}/api/projects{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
                headers=self._headers,
            ) as client:
                response = await client.request(method, url, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("%s %s failed with http status %s", method, url, status_code)
            raise ProjectsServiceError(
                self._error_message(exc.response), status_code=status_code
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ProjectsServiceError() from exc

        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ProjectsServiceError() from exc

    @staticmethod
    def _parse_project(data: Any) -> Project:
        if isinstance(data, dict) and isinstance(data.get("project"), dict):
            data = data["project"]
        try:
            return Project.model_validate(data)
        except ValidationError as exc:
            raise ProjectsServiceError() from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        for key in ("message", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None
