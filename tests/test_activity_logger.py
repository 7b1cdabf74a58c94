"""Tests for the fire-and-forget ActivityLogger."""

import logging

import pytest

from app.core.request_context import RequestContext, build_request_context
from app.models import ActivityType
from app.repositories.activity_log_repository import ActivityLogRepository
from app.schemas.task import TaskCreate
from app.services.activity_logger import ActivityLogger
from app.services.task_service import TaskService
from tests.conftest import OWNER_ID, TEAM_ID, audit_entries

pytestmark = [pytest.mark.asyncio, pytest.mark.db]


class ExplodingSession:
    """Session factory stand-in whose writes always fail."""

    async def __aenter__(self):
        raise RuntimeError("activity store unavailable")

    async def __aexit__(self, *exc_info):
        return False


async def test_writes_entry(seeded, activity_logger):
    await activity_logger.log(TEAM_ID, OWNER_ID, ActivityType.DELETE_TASK, RequestContext("198.51.100.9"))

    entries = await audit_entries(seeded, TEAM_ID)
    assert [(e.action, e.user_id, e.ip_address) for e in entries] == [
        (ActivityType.DELETE_TASK, OWNER_ID, "198.51.100.9")
    ]


async def test_oversized_forwarded_header_still_records_entry(seeded, activity_logger):
    context = build_request_context({"x-forwarded-for": "f" * 100})

    await activity_logger.log(TEAM_ID, OWNER_ID, ActivityType.CREATE_TASK, context)

    entries = await audit_entries(seeded, TEAM_ID)
    assert [e.ip_address for e in entries] == ["127.0.0.1"]


async def test_failures_are_swallowed_and_logged(caplog):
    failing = ActivityLogger(lambda: ExplodingSession())

    with caplog.at_level(logging.ERROR, logger="app.services.activity_logger"):
        await failing.log(TEAM_ID, OWNER_ID, ActivityType.CREATE_TASK)

    assert "Error logging activity CREATE_TASK" in caplog.text


async def test_failed_audit_does_not_fail_or_undo_task_create(seeded):
    service = TaskService(seeded, ActivityLogger(lambda: ExplodingSession()))

    task = await service.create_task(OWNER_ID, TEAM_ID, TaskCreate(title="Still here"))

    tasks = await service.list_tasks(TEAM_ID)
    assert [t.id for t in tasks] == [task.id]
    assert await audit_entries(seeded, TEAM_ID) == []


async def test_write_rejected_by_database_is_swallowed(seeded, activity_logger, caplog):
    # user_id is NOT NULL, so the insert itself fails
    with caplog.at_level(logging.ERROR, logger="app.services.activity_logger"):
        await activity_logger.log(TEAM_ID, None, ActivityType.UPDATE_TASK)

    assert "Error logging activity UPDATE_TASK" in caplog.text
    assert await audit_entries(seeded, TEAM_ID) == []


async def test_recent_activity_for_user_includes_name(seeded, activity_logger):
    for _ in range(12):
        await activity_logger.log(TEAM_ID, OWNER_ID, ActivityType.UPDATE_TASK)

    recent = await ActivityLogRepository(seeded).list_for_user(OWNER_ID, limit=10)

    assert len(recent) == 10
    assert all(entry.user_name == "User 1" for entry in recent)
    assert [e.id for e in recent] == sorted((e.id for e in recent), reverse=True)
