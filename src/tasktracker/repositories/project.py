"""Repository for Project entity."""

from uuid import UUID

from sqlmodel import col, select

from src.tasktracker.models import Project
from src.tasktracker.repositories.base import BaseRepository, parse_id


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_by_owner(self, owner_id: UUID) -> list[Project]:
        """List every project owned by a user, oldest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(col(Project.created_at).asc(), col(Project.id).asc())
        )
        return list(result.scalars().all())

    async def get_owned(self, project_id: UUID | str, owner_id: UUID) -> Project | None:
        """Get a project only if it is owned by ``owner_id``.

        A missing project and one owned by someone else both yield None.
        """
        entity_id = parse_id(project_id)
        if entity_id is None:
            return None
        result = await self.session.execute(
            select(Project).where(Project.id == entity_id, Project.owner_id == owner_id)
        )
        return result.scalar_one_or_none()
