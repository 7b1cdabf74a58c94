"""
Task model.

Represents a to-do item owned by a team.
"""

from typing import Optional

from sqlalchemy import String, Text, Enum, ForeignKey, Integer, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.core.config import settings
from app.models.base_model import TeamScopedModel
from app.models.enums import TaskStatus, enum_values


class Task(TeamScopedModel):
    """
    Task table - team-scoped to-do items.

    team_id is set at creation and never changes afterwards.
    """
    
    __tablename__ = "tasks"
    
    created_by: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
    )
    
    title: Mapped[str] = mapped_column(
        String(settings.TASK_TITLE_MAX_LENGTH),
        nullable=False,
    )
    
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    
    status: Mapped[TaskStatus] = mapped_column(
        Enum(TaskStatus, name="task_status", native_enum=False, values_callable=enum_values, length=20),
        nullable=False,
        default=TaskStatus.PENDING,
    )
    
    __table_args__ = (
        Index("ix_tasks_team_created", "team_id", "created_at"),
    )
