"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.tasktracker.api.dependencies.db import DBSession
from src.tasktracker.api.dependencies.repositories import ProjectRepo, TaskRepo, UserRepo
from src.tasktracker.services import AuthService, OwnershipResolver, ProjectService, TaskService


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    """Get auth service."""
    return AuthService(user_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    task_repo: TaskRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, task_repo, session)


def get_task_service(
    project_repo: ProjectRepo,
    task_repo: TaskRepo,
    session: DBSession,
) -> TaskService:
    """Get task service with an ownership resolver over the same session."""
    return TaskService(OwnershipResolver(project_repo), task_repo, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
