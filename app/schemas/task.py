"""
Task Pydantic schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.core.config import settings
from app.models.enums import TaskStatus
from app.schemas.base import TeamScopedRead


def _clean_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Title is required")
    return v


class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    There is no status field: new tasks always start as pending, and any
    status sent by the client is ignored.
    """
    
    title: str = Field(..., min_length=1, max_length=settings.TASK_TITLE_MAX_LENGTH)
    description: Optional[str] = None
    
    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _clean_title(v)


class TaskUpdate(BaseModel):
    """Schema for updating a task. All fields optional; only sent fields change."""
    
    title: Optional[str] = Field(None, min_length=1, max_length=settings.TASK_TITLE_MAX_LENGTH)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    
    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        # Explicit null would blank a required column
        if v is None:
            raise ValueError("Title cannot be null")
        return _clean_title(v)
    
    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        if v is None:
            raise ValueError("Status cannot be null")
        return v


class TaskRead(TeamScopedRead):
    """Schema for reading task data (API response)."""
    
    created_by: int
    title: str
    description: Optional[str] = None
    status: TaskStatus


class TaskDeleted(BaseModel):
    success: bool
