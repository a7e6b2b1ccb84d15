"""Project endpoints - CRUD scoped to the authenticated owner."""

from fastapi import APIRouter, status

from src.tasktracker.api.dependencies import CurrentUser, ProjectServiceDep
from src.tasktracker.schemas import (
    ErrorResponse,
    MessageResponse,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Project not found"}}
_FORBIDDEN = {403: {"model": ErrorResponse, "description": "Project owned by another user"}}


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List the caller's projects, oldest first.",
)
async def list_projects(current_user: CurrentUser, service: ProjectServiceDep) -> list[ProjectRead]:
    projects = await service.list_projects(current_user.id)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={**_NOT_FOUND, **_FORBIDDEN},
)
async def get_project(
    project_id: str,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Get a project by ID. Only the owner may read it."""
    project = await service.get_project(project_id, current_user.id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={400: {"model": ErrorResponse, "description": "Missing or invalid name"}},
)
async def create_project(
    request: ProjectCreate,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Create a project owned by the caller."""
    project = await service.create_project(
        current_user.id,
        name=request.name,
        description=request.description,
    )
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Partial update: omitted or null fields are left unchanged.",
    responses={**_NOT_FOUND, **_FORBIDDEN},
)
async def update_project(
    project_id: str,
    request: ProjectUpdate,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.update_project(
        project_id,
        current_user.id,
        name=request.name,
        description=request.description,
    )
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Delete project",
    description="Delete a project and all of its tasks.",
    responses={**_NOT_FOUND, **_FORBIDDEN},
)
async def delete_project(
    project_id: str,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> MessageResponse:
    await service.delete_project(project_id, current_user.id)
    return MessageResponse(message="Project deleted successfully.")
