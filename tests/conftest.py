"""
Pytest configuration and shared fixtures.

The suite runs against an in-memory SQLite database (aiosqlite) so it needs
no running PostgreSQL server.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-signed-session-cookies")

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.models import ActivityLog, Team, TeamMember, TeamRole, User
from app.services.activity_logger import ActivityLogger
from app.services.task_service import TaskService


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: uses the test database")


@pytest_asyncio.fixture
async def engine():
    # StaticPool keeps one connection so every session sees the same in-memory DB
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def activity_logger(session_maker):
    return ActivityLogger(session_maker)


@pytest.fixture
def service(db, activity_logger):
    return TaskService(db, activity_logger)


async def add_user(db: AsyncSession, user_id: int, name: str = None) -> User:
    user = User(id=user_id, name=name or f"User {user_id}", email=f"user{user_id}@example.com")
    db.add(user)
    await db.flush()
    return user


async def add_team(db: AsyncSession, team_id: int, name: str = None) -> Team:
    team = Team(id=team_id, name=name or f"Team {team_id}")
    db.add(team)
    await db.flush()
    return team


async def add_member(db: AsyncSession, user_id: int, team_id: int, role: TeamRole) -> TeamMember:
    member = TeamMember(user_id=user_id, team_id=team_id, role=role)
    db.add(member)
    await db.flush()
    return member


# User ids used across the suite
OWNER_ID = 1
MEMBER_ID = 2
VIEWER_ID = 3
OUTSIDER_ID = 4  # owner of team 9, no role on team 7
STRANGER_ID = 5  # on no team at all

TEAM_ID = 7
OTHER_TEAM_ID = 9


@pytest_asyncio.fixture
async def seeded(db):
    """Team 7 with an owner, a member and a viewer; team 9 owned by an outsider."""
    for user_id in (OWNER_ID, MEMBER_ID, VIEWER_ID, OUTSIDER_ID, STRANGER_ID):
        await add_user(db, user_id)
    await add_team(db, TEAM_ID)
    await add_team(db, OTHER_TEAM_ID)
    await add_member(db, OWNER_ID, TEAM_ID, TeamRole.OWNER)
    await add_member(db, MEMBER_ID, TEAM_ID, TeamRole.MEMBER)
    await add_member(db, VIEWER_ID, TEAM_ID, TeamRole.VIEWER)
    await add_member(db, OUTSIDER_ID, OTHER_TEAM_ID, TeamRole.OWNER)
    await db.commit()
    return db


async def audit_entries(db: AsyncSession, team_id: int) -> list[ActivityLog]:
    """Activity rows of a team, newest first."""
    result = await db.execute(
        select(ActivityLog)
        .where(ActivityLog.team_id == team_id)
        .order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc())
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())
