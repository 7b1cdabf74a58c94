"""
Activity router - the current user's recent audit entries.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.repositories.activity_log_repository import ActivityLogRepository
from app.schemas.activity_log import ActivityLogRead

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("", response_model=List[ActivityLogRead])
async def list_my_activity(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Most recent activity recorded for the signed-in user, newest first."""
    repo = ActivityLogRepository(db)
    return await repo.list_for_user(user.id, limit=settings.RECENT_ACTIVITY_LIMIT)
