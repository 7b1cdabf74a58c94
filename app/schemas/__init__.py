"""
Schemas package.

Pydantic models for request validation and API responses.
"""

from app.schemas.base import TeamScopedRead
from app.schemas.task import TaskCreate, TaskUpdate, TaskRead, TaskDeleted
from app.schemas.activity_log import ActivityLogRead

__all__ = [
    "TeamScopedRead",
    "TaskCreate",
    "TaskUpdate",
    "TaskRead",
    "TaskDeleted",
    "ActivityLogRead",
]
