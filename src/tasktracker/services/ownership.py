"""Ownership resolution for resources nested under a project."""

from uuid import UUID

from src.tasktracker.core.logging import get_logger
from src.tasktracker.models import Project
from src.tasktracker.repositories import ProjectRepository

logger = get_logger(__name__)


class OwnershipResolver:
    """Decides whether a user owns a project.

    Existence and authorization are merged into one outcome: callers cannot
    tell a missing project from one that belongs to somebody else.
    """

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def resolve_owned_project(self, project_id: UUID | str, user_id: UUID) -> Project | None:
        """Return the project if ``user_id`` owns it, otherwise None."""
        project = await self.project_repo.get_owned(project_id, user_id)
        if project is None:
            logger.debug("Project not resolved for user", project_id=str(project_id))
        return project
