"""Project service - CRUD scoped to the owning user."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from src.tasktracker.core.logging import get_logger
from src.tasktracker.models import Project
from src.tasktracker.models.base import utc_now
from src.tasktracker.repositories import ProjectRepository, TaskRepository
from src.tasktracker.services.base import store_errors

logger = get_logger(__name__)

_FORBIDDEN_MESSAGES = {
    "view": "User does not have authorization to view this project.",
    "update": "User is not authorized to update this project.",
    "delete": "User is not authorized to delete this project.",
}


class ProjectService:
    """Project CRUD.

    Direct access distinguishes a missing project (NotFoundError) from one
    owned by another user (ForbiddenError).
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        task_repo: TaskRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.task_repo = task_repo
        self.session = session

    async def _get_for_owner(self, project_id: UUID | str, user_id: UUID, action: str) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project with id: {project_id} not found.")
        if project.owner_id != user_id:
            logger.warning(
                "Project access denied",
                project_id=str(project.id),
                action=action,
            )
            raise ForbiddenError(_FORBIDDEN_MESSAGES[action])
        return project

    async def list_projects(self, user_id: UUID) -> list[Project]:
        """List the caller's projects, oldest first."""
        async with store_errors(self.session, "fetching projects"):
            return await self.project_repo.list_by_owner(user_id)

    async def get_project(self, project_id: UUID | str, user_id: UUID) -> Project:
        """Get a project the caller owns."""
        async with store_errors(self.session, "fetching project"):
            return await self._get_for_owner(project_id, user_id, "view")

    async def create_project(
        self,
        user_id: UUID,
        name: str | None,
        description: str | None = None,
    ) -> Project:
        """Create a project owned by the caller."""
        if not name or not name.strip():
            raise ValidationError("Project name is required.")

        async with store_errors(self.session, "creating project"):
            project = Project(name=name, description=description, owner_id=user_id)
            self.project_repo.add(project)
            await self.session.commit()

        logger.info("Project created", project_id=str(project.id))
        return project

    async def update_project(
        self,
        project_id: UUID | str,
        user_id: UUID,
        name: str | None = None,
        description: str | None = None,
    ) -> Project:
        """Apply a partial update; None means "leave unchanged"."""
        if name is not None and not name.strip():
            raise ValidationError("Project name cannot be empty.")

        async with store_errors(self.session, "updating project"):
            project = await self._get_for_owner(project_id, user_id, "update")

            if name is not None:
                project.name = name
            if description is not None:
                project.description = description
            project.updated_at = utc_now()

            await self.session.commit()

        logger.info("Project updated", project_id=str(project.id))
        return project

    async def delete_project(self, project_id: UUID | str, user_id: UUID) -> None:
        """Delete a project together with all of its tasks."""
        async with store_errors(self.session, "deleting project"):
            project = await self._get_for_owner(project_id, user_id, "delete")
            deleted_tasks = await self.task_repo.delete_by_project(project.id)
            await self.project_repo.delete(project)
            await self.session.commit()

        logger.info("Project deleted", project_id=str(project.id), deleted_tasks=deleted_tasks)
