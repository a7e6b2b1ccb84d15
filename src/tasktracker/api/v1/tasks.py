"""Task endpoints - nested under a project owned by the caller.

A project that does not exist and one owned by another user both answer
404 here, unlike the direct project endpoints which answer 403 for the
latter.
"""

from fastapi import APIRouter, status

from src.tasktracker.api.dependencies import CurrentUser, TaskServiceDep
from src.tasktracker.schemas import (
    ErrorResponse,
    MessageResponse,
    TaskCreate,
    TaskRead,
    TaskUpdate,
)

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Project or task not found"}}


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List tasks",
    responses=_NOT_FOUND,
)
async def list_tasks(
    project_id: str,
    current_user: CurrentUser,
    service: TaskServiceDep,
) -> list[TaskRead]:
    """List the project's tasks, oldest first."""
    tasks = await service.list_tasks(project_id, current_user.id)
    return [TaskRead.model_validate(t) for t in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Get task",
    responses=_NOT_FOUND,
)
async def get_task(
    project_id: str,
    task_id: str,
    current_user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    task = await service.get_task(project_id, task_id, current_user.id)
    return TaskRead.model_validate(task)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={
        **_NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Missing or invalid title/status"},
    },
)
async def create_task(
    project_id: str,
    request: TaskCreate,
    current_user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    """Create a task. Status defaults to ``todo``."""
    task = await service.create_task(
        project_id,
        current_user.id,
        title=request.title,
        description=request.description,
        status=request.status,
    )
    return TaskRead.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update task",
    description="Partial update: omitted or null fields are left unchanged.",
    responses=_NOT_FOUND,
)
async def update_task(
    project_id: str,
    task_id: str,
    request: TaskUpdate,
    current_user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    task = await service.update_task(
        project_id,
        task_id,
        current_user.id,
        title=request.title,
        description=request.description,
        status=request.status,
    )
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete task",
    responses=_NOT_FOUND,
)
async def delete_task(
    project_id: str,
    task_id: str,
    current_user: CurrentUser,
    service: TaskServiceDep,
) -> MessageResponse:
    await service.delete_task(project_id, task_id, current_user.id)
    return MessageResponse(message="Task deleted successfully.")
