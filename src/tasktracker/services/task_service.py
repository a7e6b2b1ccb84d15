"""Task service - CRUD scoped to a project owned by the caller."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import NotFoundError, ValidationError
from src.tasktracker.core.logging import get_logger
from src.tasktracker.models import Project, Task, TaskStatus
from src.tasktracker.models.base import utc_now
from src.tasktracker.repositories import TaskRepository
from src.tasktracker.services.base import store_errors
from src.tasktracker.services.ownership import OwnershipResolver

logger = get_logger(__name__)


def _coerce_status(status: TaskStatus | str) -> str:
    try:
        return TaskStatus(status).value
    except ValueError as e:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise ValidationError(f"Task status must be one of: {allowed}.") from e


class TaskService:
    """Task CRUD.

    Every operation resolves the parent project through the ownership
    resolver first. A project that is missing or not owned by the caller
    yields the same NotFoundError, and tasks are looked up by the compound
    key (task_id, project_id).
    """

    def __init__(
        self,
        ownership: OwnershipResolver,
        task_repo: TaskRepository,
        session: AsyncSession,
    ):
        self.ownership = ownership
        self.task_repo = task_repo
        self.session = session

    async def _resolve_project(self, project_id: UUID | str, user_id: UUID) -> Project:
        project = await self.ownership.resolve_owned_project(project_id, user_id)
        if project is None:
            raise NotFoundError(f"Project with id: {project_id} not found or not authorized.")
        return project

    async def _get_task(self, project: Project, task_id: UUID | str) -> Task:
        task = await self.task_repo.get_in_project(task_id, project.id)
        if task is None:
            raise NotFoundError(f"Task with id: {task_id} not found in this project.")
        return task

    async def list_tasks(self, project_id: UUID | str, user_id: UUID) -> list[Task]:
        """List the tasks of an owned project, oldest first."""
        async with store_errors(self.session, "fetching tasks"):
            project = await self._resolve_project(project_id, user_id)
            return await self.task_repo.list_by_project(project.id)

    async def get_task(self, project_id: UUID | str, task_id: UUID | str, user_id: UUID) -> Task:
        """Get a single task of an owned project."""
        async with store_errors(self.session, "fetching task"):
            project = await self._resolve_project(project_id, user_id)
            return await self._get_task(project, task_id)

    async def create_task(
        self,
        project_id: UUID | str,
        user_id: UUID,
        title: str | None,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> Task:
        """Create a task in an owned project. Status defaults to ``todo``."""
        if not title or not title.strip():
            raise ValidationError("Task title is required.")
        task_status = _coerce_status(status) if status is not None else TaskStatus.TODO.value

        async with store_errors(self.session, "creating task"):
            project = await self._resolve_project(project_id, user_id)
            task = Task(
                project_id=project.id,
                title=title,
                description=description,
                status=task_status,
            )
            self.task_repo.add(task)
            await self.session.commit()

        logger.info("Task created", project_id=str(task.project_id), task_id=str(task.id))
        return task

    async def update_task(
        self,
        project_id: UUID | str,
        task_id: UUID | str,
        user_id: UUID,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> Task:
        """Apply a partial update; None means "leave unchanged"."""
        if title is not None and not title.strip():
            raise ValidationError("Task title cannot be empty.")
        new_status = _coerce_status(status) if status is not None else None

        async with store_errors(self.session, "updating task"):
            project = await self._resolve_project(project_id, user_id)
            task = await self._get_task(project, task_id)

            if title is not None:
                task.title = title
            if description is not None:
                task.description = description
            if new_status is not None:
                task.status = new_status
            task.updated_at = utc_now()

            await self.session.commit()

        logger.info("Task updated", project_id=str(task.project_id), task_id=str(task.id))
        return task

    async def delete_task(self, project_id: UUID | str, task_id: UUID | str, user_id: UUID) -> None:
        """Delete a task of an owned project."""
        async with store_errors(self.session, "deleting task"):
            project = await self._resolve_project(project_id, user_id)
            task = await self._get_task(project, task_id)
            await self.task_repo.delete(task)
            await self.session.commit()

        logger.info("Task deleted", project_id=str(task.project_id), task_id=str(task.id))
