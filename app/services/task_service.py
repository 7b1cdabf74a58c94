"""
Task business logic service.

Each operation is a single request/response: validate, mutate, commit,
then record activity. Cached list views go stale on their own because
the list ETag is a fingerprint of the rows (see task_list_cache).
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.permissions import can_create_tasks
from app.core.request_context import RequestContext
from app.errors import AppError, DataStoreError, ForbiddenError
from app.models.enums import ActivityType
from app.models.task import Task
from app.repositories.task_repository import TaskRepository
from app.repositories.team_member_repository import TeamMemberRepository
from app.schemas.task import TaskCreate, TaskUpdate
from app.services.access_validator import validate_task_access
from app.services.activity_logger import ActivityLogger

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task business logic."""

    def __init__(
        self,
        db: AsyncSession,
        activity_logger: ActivityLogger,
        context: Optional[RequestContext] = None,
    ):
        self.db = db
        self.repository = TaskRepository(db)
        self.members = TeamMemberRepository(db)
        self.activity_logger = activity_logger
        self.context = context

    async def list_tasks(self, team_id: int) -> List[Task]:
        """List every task of a team, most recent first."""
        try:
            return await self.repository.list_for_team(team_id)
        except SQLAlchemyError as exc:
            await self._store_failure("Failed to fetch tasks")
            raise DataStoreError("Failed to fetch tasks") from exc

    async def get_task(self, team_id: int, task_id: int) -> Optional[Task]:
        """Get a task by ID within a team."""
        try:
            return await self.repository.get_for_team(team_id, task_id)
        except SQLAlchemyError as exc:
            await self._store_failure("Failed to fetch task")
            raise DataStoreError("Failed to fetch task") from exc

    async def create_task(self, user_id: int, team_id: int, data: TaskCreate) -> Task:
        """Create a pending task. Only team owners may create."""
        try:
            team_member = await self.members.get_membership(user_id, team_id)
            if not can_create_tasks(team_member):
                raise ForbiddenError("You do not have permission to create tasks")

            task = await self.repository.create(team_id, user_id, data)
            await self.db.commit()
        except AppError as exc:
            self._rejected("create", user_id, team_id, None, exc)
            raise
        except SQLAlchemyError as exc:
            await self._store_failure("Failed to create task")
            raise DataStoreError("Failed to create task") from exc

        await self._after_mutation(team_id, user_id, ActivityType.CREATE_TASK)
        return task

    async def update_task(
        self,
        task_id: int,
        user_id: int,
        team_id: int,
        data: TaskUpdate,
    ) -> Task:
        """Apply a partial update after access validation."""
        try:
            task, _ = await validate_task_access(self.db, task_id, user_id, team_id)
            task = await self.repository.update(task, data)
            await self.db.commit()
        except AppError as exc:
            self._rejected("update", user_id, team_id, task_id, exc)
            raise
        except SQLAlchemyError as exc:
            await self._store_failure("Failed to update task")
            raise DataStoreError("Failed to update task") from exc

        await self._after_mutation(team_id, user_id, ActivityType.UPDATE_TASK)
        return task

    async def toggle_task_status(self, task_id: int, user_id: int, team_id: int) -> Task:
        """Flip pending <-> completed through the regular update path."""
        try:
            task, _ = await validate_task_access(self.db, task_id, user_id, team_id)
        except AppError as exc:
            self._rejected("toggle", user_id, team_id, task_id, exc)
            raise
        except SQLAlchemyError as exc:
            await self._store_failure("Failed to update task")
            raise DataStoreError("Failed to update task") from exc

        return await self.update_task(
            task_id, user_id, team_id, TaskUpdate(status=task.status.toggled())
        )

    async def delete_task(self, task_id: int, user_id: int, team_id: int) -> bool:
        """Physically delete a task after access validation."""
        try:
            task, _ = await validate_task_access(self.db, task_id, user_id, team_id)
            await self.repository.delete(task)
            await self.db.commit()
        except AppError as exc:
            self._rejected("delete", user_id, team_id, task_id, exc)
            raise
        except SQLAlchemyError as exc:
            await self._store_failure("Failed to delete task")
            raise DataStoreError("Failed to delete task") from exc

        await self._after_mutation(team_id, user_id, ActivityType.DELETE_TASK)
        return True

    async def _after_mutation(self, team_id: int, user_id: int, action: ActivityType) -> None:
        await self.activity_logger.log(team_id, user_id, action, self.context)

    def _rejected(
        self,
        operation: str,
        user_id: int,
        team_id: int,
        task_id: Optional[int],
        exc: AppError,
    ) -> None:
        logger.warning(
            "Task %s rejected (%s): user=%s team=%s task=%s",
            operation, exc.code, user_id, team_id, task_id,
        )

    async def _store_failure(self, message: str) -> None:
        logger.exception(message)
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed after: %s", message)
