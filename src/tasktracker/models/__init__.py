"""Model exports.

Import from here: `from src.tasktracker.models import Project, Task`
"""

from src.tasktracker.models.enums import TaskStatus
from src.tasktracker.models.project import Project
from src.tasktracker.models.task import Task
from src.tasktracker.models.user import User

__all__ = [
    "Project",
    "Task",
    "TaskStatus",
    "User",
]
