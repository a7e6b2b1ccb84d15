from src.tasktracker.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from src.tasktracker.schemas.common import ErrorResponse, MessageResponse
from src.tasktracker.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.tasktracker.schemas.task import TaskCreate, TaskRead, TaskUpdate
from src.tasktracker.schemas.user import UserRead

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    # Common
    "ErrorResponse",
    "MessageResponse",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    # Task
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    # User
    "UserRead",
]
