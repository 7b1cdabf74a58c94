"""
Task access validation.

Every mutating task operation goes through validate_task_access so team
scoping and role checks live in one place.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.permissions import can_manage_tasks
from app.errors import ForbiddenError, TaskNotFoundError, TeamMismatchError
from app.models.task import Task
from app.models.team import TeamMember
from app.repositories.task_repository import TaskRepository
from app.repositories.team_member_repository import TeamMemberRepository

logger = logging.getLogger(__name__)


async def validate_task_access(
    db: AsyncSession,
    task_id: int,
    user_id: int,
    team_id: int,
) -> Tuple[Task, Optional[TeamMember]]:
    """
    Confirm a user may manage a task on behalf of a team.

    Checks run in a fixed order: the task must exist, must belong to
    ``team_id``, and the user's role on ``team_id`` must allow managing tasks.

    Returns:
        The loaded task and the user's membership row

    Raises:
        TaskNotFoundError: no task has this id
        TeamMismatchError: the task belongs to another team
        ForbiddenError: the user is not an owner or member of the team
    """
    # A missing membership only means "cannot manage"; it is not an error yet
    team_member = await TeamMemberRepository(db).get_membership(user_id, team_id)
    task = await TaskRepository(db).get_by_id(task_id)

    if task is None:
        raise TaskNotFoundError(task_id)

    if task.team_id != team_id:
        logger.warning(
            "User %s addressed task %s via team %s but it belongs to team %s",
            user_id, task_id, team_id, task.team_id,
        )
        raise TeamMismatchError(task_id, team_id)

    if not can_manage_tasks(team_member):
        raise ForbiddenError()

    return task, team_member
