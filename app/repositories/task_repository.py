"""
Task repository - database operations for Task.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import TaskStatus
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskUpdate
from app.utils.time import next_timestamp, utc_now

# team_id and created_by are fixed at creation
UPDATABLE_FIELDS = ("title", "description", "status")


class TaskRepository:
    """Repository for Task database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def list_for_team(self, team_id: int) -> List[Task]:
        """List all tasks for a team, newest first."""
        result = await self.db.execute(
            select(Task)
            .where(Task.team_id == team_id)
            .order_by(Task.created_at.desc(), Task.id.desc())
        )
        return list(result.scalars().all())
    
    async def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get a task by ID regardless of team. Callers check ownership."""
        result = await self.db.execute(
            select(Task).where(Task.id == task_id)
        )
        return result.scalar_one_or_none()
    
    async def get_for_team(self, team_id: int, task_id: int) -> Optional[Task]:
        """Get a task by ID for a specific team."""
        result = await self.db.execute(
            select(Task).where(
                Task.id == task_id,
                Task.team_id == team_id,
            )
        )
        return result.scalar_one_or_none()
    
    async def create(self, team_id: int, created_by: int, data: TaskCreate) -> Task:
        """Create a new pending task."""
        now = utc_now()
        task = Task(
            team_id=team_id,
            created_by=created_by,
            title=data.title,
            description=data.description,
            status=TaskStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self.db.add(task)
        await self.db.flush()
        await self.db.refresh(task)
        return task
    
    async def update(self, task: Task, data: TaskUpdate) -> Task:
        """Apply the fields that were sent; always bump updated_at."""
        update_data = data.model_dump(exclude_unset=True, include=set(UPDATABLE_FIELDS))
        for field, value in update_data.items():
            setattr(task, field, value)
        
        task.updated_at = next_timestamp(task.updated_at)
        await self.db.flush()
        await self.db.refresh(task)
        return task
    
    async def delete(self, task: Task) -> None:
        """Physically delete a task."""
        await self.db.delete(task)
        await self.db.flush()
