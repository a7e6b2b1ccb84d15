from src.tasktracker.services.auth_service import AuthService
from src.tasktracker.services.ownership import OwnershipResolver
from src.tasktracker.services.project_service import ProjectService
from src.tasktracker.services.task_service import TaskService

__all__ = ["AuthService", "OwnershipResolver", "ProjectService", "TaskService"]
