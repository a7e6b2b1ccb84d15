"""Task model - reachable only through its parent project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.tasktracker.models.base import utc_now
from src.tasktracker.models.enums import TaskStatus


class Task(SQLModel, table=True):
    """Task entity.

    Carries no owner of its own; ``project_id`` is immutable after creation.
    """

    __tablename__ = "tasks"
    __table_args__ = (Index("ix_tasks_project_created", "project_id", "created_at"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id")
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: str = Field(default=TaskStatus.TODO.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
