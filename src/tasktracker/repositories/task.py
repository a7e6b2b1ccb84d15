"""Repository for Task entity (always scoped to a project)."""

from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select

from src.tasktracker.models import Task
from src.tasktracker.repositories.base import BaseRepository, parse_id


class TaskRepository(BaseRepository[Task]):
    """Repository for Task entity."""

    model = Task

    async def list_by_project(self, project_id: UUID) -> list[Task]:
        """List all tasks of a project, oldest first."""
        result = await self.session.execute(
            select(Task)
            .where(Task.project_id == project_id)
            .order_by(col(Task.created_at).asc(), col(Task.id).asc())
        )
        return list(result.scalars().all())

    async def get_in_project(self, task_id: UUID | str, project_id: UUID) -> Task | None:
        """Get a task by its compound key (task_id, project_id).

        A task that exists under another project is treated as missing.
        """
        entity_id = parse_id(task_id)
        if entity_id is None:
            return None
        result = await self.session.execute(
            select(Task).where(Task.id == entity_id, Task.project_id == project_id)
        )
        return result.scalar_one_or_none()

    async def delete_by_project(self, project_id: UUID) -> int:
        """Delete every task of a project (no commit). Returns rows affected."""
        result = await self.session.execute(delete(Task).where(col(Task.project_id) == project_id))
        return result.rowcount or 0  # type: ignore[attr-defined]
