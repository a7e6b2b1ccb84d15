"""Test helper functions for common data creation patterns."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.security import create_access_token
from src.tasktracker.models import Project, Task, User
from tests.factories import ProjectFactory, TaskFactory, UserFactory


def auth_headers(user_id: UUID | str) -> dict[str, str]:
    """Bearer headers carrying a fresh access token for ``user_id``."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    """Create a user.

    Args:
        session: Database session
        **user_kwargs: Args passed to UserFactory

    Returns:
        Created user
    """
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.flush()
    return user


async def create_project(session: AsyncSession, owner: User, **project_kwargs) -> Project:
    """Create a project owned by ``owner``."""
    project = ProjectFactory.build(owner_id=owner.id, **project_kwargs)
    session.add(project)
    await session.flush()
    return project


async def create_task(session: AsyncSession, project: Project, **task_kwargs) -> Task:
    """Create a task under ``project``."""
    task = TaskFactory.build(project_id=project.id, **task_kwargs)
    session.add(task)
    await session.flush()
    return task


async def create_project_with_tasks(
    session: AsyncSession,
    owner: User,
    task_count: int = 2,
) -> tuple[Project, list[Task]]:
    """Create a project with ``task_count`` tasks.

    Returns:
        Tuple of (project, tasks)
    """
    project = await create_project(session, owner)
    tasks = [await create_task(session, project) for _ in range(task_count)]
    return project, tasks
