"""Tests for validate_task_access: existence, team scoping, and role checks."""

import pytest

from app.errors import ForbiddenError, TaskNotFoundError, TeamMismatchError
from app.models import Task, TaskStatus, TeamRole
from app.services.access_validator import validate_task_access
from tests.conftest import (
    MEMBER_ID,
    OTHER_TEAM_ID,
    OUTSIDER_ID,
    OWNER_ID,
    STRANGER_ID,
    TEAM_ID,
    VIEWER_ID,
)

pytestmark = [pytest.mark.asyncio, pytest.mark.db]


async def make_task(db, team_id=TEAM_ID, created_by=OWNER_ID, title="Welcome Task"):
    task = Task(team_id=team_id, created_by=created_by, title=title, status=TaskStatus.PENDING)
    db.add(task)
    await db.commit()
    return task


@pytest.mark.parametrize("user_id, role", [(OWNER_ID, TeamRole.OWNER), (MEMBER_ID, TeamRole.MEMBER)])
async def test_owner_and_member_get_task_and_membership(seeded, user_id, role):
    task = await make_task(seeded)

    loaded, team_member = await validate_task_access(seeded, task.id, user_id, TEAM_ID)

    assert loaded.id == task.id
    assert team_member.user_id == user_id
    assert team_member.role == role


async def test_missing_task_is_not_found(seeded):
    with pytest.raises(TaskNotFoundError) as exc_info:
        await validate_task_access(seeded, 999, OWNER_ID, TEAM_ID)

    assert exc_info.value.code == "TASK_NOT_FOUND"
    assert exc_info.value.status_code == 404


@pytest.mark.parametrize("user_id", [OWNER_ID, MEMBER_ID, VIEWER_ID, OUTSIDER_ID, STRANGER_ID])
async def test_wrong_team_is_mismatch_regardless_of_role(seeded, user_id):
    task = await make_task(seeded, team_id=TEAM_ID)

    with pytest.raises(TeamMismatchError) as exc_info:
        await validate_task_access(seeded, task.id, user_id, OTHER_TEAM_ID)

    assert exc_info.value.code == "TASK_TEAM_MISMATCH"


async def test_mismatch_checked_before_role(seeded):
    # Outsider owns team 9; claiming team 9 for a team 7 task must not pass
    task = await make_task(seeded, team_id=TEAM_ID)

    with pytest.raises(TeamMismatchError):
        await validate_task_access(seeded, task.id, OUTSIDER_ID, OTHER_TEAM_ID)


@pytest.mark.parametrize("user_id", [VIEWER_ID, OUTSIDER_ID, STRANGER_ID])
async def test_viewer_or_non_member_is_forbidden(seeded, user_id):
    task = await make_task(seeded)

    with pytest.raises(ForbiddenError) as exc_info:
        await validate_task_access(seeded, task.id, user_id, TEAM_ID)

    assert exc_info.value.status_code == 403
    assert exc_info.value.code == "FORBIDDEN"


async def test_not_found_checked_before_role(seeded):
    with pytest.raises(TaskNotFoundError):
        await validate_task_access(seeded, 12345, STRANGER_ID, TEAM_ID)
