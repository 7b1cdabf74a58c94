"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from app.models.enums import TeamRole, TaskStatus, ActivityType
from app.models.user import User
from app.models.team import Team, TeamMember
from app.models.task import Task
from app.models.activity_log import ActivityLog

# Export all models
__all__ = [
    "TeamRole",
    "TaskStatus",
    "ActivityType",
    "User",
    "Team",
    "TeamMember",
    "Task",
    "ActivityLog",
]
