"""Project routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from prox.api.deps import get_project_manager
from prox.api.schemas.projects import CreateProjectRequest, UpdateProjectRequest
from prox.core.project_manager import CreateProjectInput, ProjectManager, ProjectNotFoundError
from prox.models.project import Project

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=list[Project])
async def list_projects(manager: ProjectManager = Depends(get_project_manager)) -> list[Project]:
    return await manager.list()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Project)
async def create_project(
    request: CreateProjectRequest,
    manager: ProjectManager = Depends(get_project_manager),
) -> Project:
    return await manager.create(
        CreateProjectInput(
            title=request.title,
            description=request.description,
            technology=request.technology,
            deadline=request.deadline,
            technologies=request.technologies,
            students_count=request.students_count,
            status=request.status,
            progress_percent=request.progress_percent,
            url=request.url,
            logo=request.logo,
        )
    )


@router.get("/{project_id}", response_model=Project)
async def get_project(
    project_id: str, manager: ProjectManager = Depends(get_project_manager)
) -> Project:
    project = await manager.get(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Loyiha topilmadi")
    return project


@router.put("/{project_id}", response_model=Project)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    manager: ProjectManager = Depends(get_project_manager),
) -> Project:
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    try:
        return await manager.update(project_id, changes)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    manager: ProjectManager = Depends(get_project_manager),
) -> None:
    try:
        await manager.delete(project_id)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
