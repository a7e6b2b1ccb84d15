"""Shared enums for models."""

from enum import Enum


class TaskStatus(str, Enum):
    """Workflow state of a task."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
