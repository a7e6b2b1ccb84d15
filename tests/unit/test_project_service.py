"""Unit tests for ProjectService."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.tasktracker.core.exceptions import (
    ForbiddenError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from src.tasktracker.models import Project
from src.tasktracker.services import ProjectService

pytestmark = pytest.mark.unit


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def mock_project_repo() -> MagicMock:
    """Create mock project repository."""
    repo = MagicMock()
    repo.add = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.list_by_owner = AsyncMock(return_value=[])
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_task_repo() -> MagicMock:
    repo = MagicMock()
    repo.delete_by_project = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def mock_session() -> AsyncMock:
    """Create mock database session."""
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def service(mock_project_repo, mock_task_repo, mock_session) -> ProjectService:
    return ProjectService(mock_project_repo, mock_task_repo, mock_session)


def _project(owner_id, **kwargs) -> Project:
    return Project(name=kwargs.pop("name", "Trip"), owner_id=owner_id, **kwargs)


class TestCreateProject:
    async def test_sets_owner_and_commits(self, service, mock_project_repo, mock_session, owner_id):
        project = await service.create_project(owner_id, name="Trip", description="Summer")

        assert project.owner_id == owner_id
        assert project.name == "Trip"
        assert project.description == "Summer"
        mock_project_repo.add.assert_called_once_with(project)
        mock_session.commit.assert_called_once()

    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_rejects_missing_name(self, service, mock_project_repo, owner_id, name):
        with pytest.raises(ValidationError, match="Project name is required."):
            await service.create_project(owner_id, name=name)

        mock_project_repo.add.assert_not_called()

    async def test_store_failure_becomes_internal_error(
        self, service, mock_session, owner_id
    ):
        mock_session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

        with pytest.raises(InternalError, match="Server error creating project."):
            await service.create_project(owner_id, name="Trip")

        mock_session.rollback.assert_called_once()


class TestGetProject:
    async def test_missing_project(self, service, owner_id):
        project_id = uuid4()

        with pytest.raises(NotFoundError, match=f"Project with id: {project_id} not found."):
            await service.get_project(project_id, owner_id)

    async def test_other_owner_is_forbidden(self, service, mock_project_repo, owner_id):
        mock_project_repo.get_by_id.return_value = _project(uuid4())

        with pytest.raises(ForbiddenError) as exc_info:
            await service.get_project(uuid4(), owner_id)

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "User does not have authorization to view this project."

    async def test_owner_gets_project(self, service, mock_project_repo, owner_id):
        project = _project(owner_id)
        mock_project_repo.get_by_id.return_value = project

        assert await service.get_project(project.id, owner_id) is project


class TestListProjects:
    async def test_lists_by_owner(self, service, mock_project_repo, owner_id):
        projects = [_project(owner_id), _project(owner_id)]
        mock_project_repo.list_by_owner.return_value = projects

        assert await service.list_projects(owner_id) == projects
        mock_project_repo.list_by_owner.assert_called_once_with(owner_id)

    async def test_store_failure(self, service, mock_project_repo, mock_session, owner_id):
        mock_project_repo.list_by_owner.side_effect = OperationalError("SELECT", {}, Exception())

        with pytest.raises(InternalError, match="Server error fetching projects."):
            await service.list_projects(owner_id)

        mock_session.rollback.assert_called_once()


class TestUpdateProject:
    async def test_none_leaves_fields_unchanged(self, service, mock_project_repo, owner_id):
        project = _project(owner_id, name="Trip", description="Summer")
        mock_project_repo.get_by_id.return_value = project

        updated = await service.update_project(project.id, owner_id, name=None, description=None)

        assert updated.name == "Trip"
        assert updated.description == "Summer"

    async def test_updates_given_fields(self, service, mock_project_repo, mock_session, owner_id):
        project = _project(owner_id, name="Trip", description="Summer")
        mock_project_repo.get_by_id.return_value = project

        updated = await service.update_project(project.id, owner_id, description="Winter")

        assert updated.name == "Trip"
        assert updated.description == "Winter"
        mock_session.commit.assert_called_once()

    async def test_blank_name_rejected(self, service, mock_project_repo, owner_id):
        with pytest.raises(ValidationError):
            await service.update_project(uuid4(), owner_id, name="  ")

        mock_project_repo.get_by_id.assert_not_called()

    async def test_other_owner_is_forbidden(self, service, mock_project_repo, mock_session, owner_id):
        mock_project_repo.get_by_id.return_value = _project(uuid4())

        with pytest.raises(ForbiddenError, match="not authorized to update"):
            await service.update_project(uuid4(), owner_id, name="Mine now")

        mock_session.commit.assert_not_called()


class TestDeleteProject:
    async def test_cascades_tasks_in_same_transaction(
        self, service, mock_project_repo, mock_task_repo, mock_session, owner_id
    ):
        project = _project(owner_id)
        mock_project_repo.get_by_id.return_value = project
        mock_task_repo.delete_by_project.return_value = 3

        await service.delete_project(project.id, owner_id)

        mock_task_repo.delete_by_project.assert_called_once_with(project.id)
        mock_project_repo.delete.assert_called_once_with(project)
        mock_session.commit.assert_called_once()

    async def test_other_owner_is_forbidden(
        self, service, mock_project_repo, mock_task_repo, owner_id
    ):
        mock_project_repo.get_by_id.return_value = _project(uuid4())

        with pytest.raises(ForbiddenError, match="not authorized to delete"):
            await service.delete_project(uuid4(), owner_id)

        mock_task_repo.delete_by_project.assert_not_called()

    async def test_store_failure_rolls_back(
        self, service, mock_project_repo, mock_task_repo, mock_session, owner_id
    ):
        mock_project_repo.get_by_id.return_value = _project(owner_id)
        mock_task_repo.delete_by_project.side_effect = OperationalError("DELETE", {}, Exception())

        with pytest.raises(InternalError, match="Server error deleting project."):
            await service.delete_project(uuid4(), owner_id)

        mock_session.rollback.assert_called_once()
        mock_session.commit.assert_not_called()
