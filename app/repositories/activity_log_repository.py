"""
Repository for ActivityLog database operations.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.activity_log import ActivityLog
from app.models.enums import ActivityType
from app.models.user import User
from app.schemas.activity_log import ActivityLogRead


class ActivityLogRepository:
    """Repository for ActivityLog operations. Entries are never updated or deleted."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def create(
        self,
        team_id: int,
        user_id: int,
        action: ActivityType,
        ip_address: str,
        timestamp: Optional[datetime] = None,
    ) -> ActivityLog:
        """Append an activity entry."""
        entry = ActivityLog(
            team_id=team_id,
            user_id=user_id,
            action=action,
            ip_address=ip_address,
        )
        if timestamp is not None:
            entry.timestamp = timestamp
        self.db.add(entry)
        await self.db.flush()
        return entry
    
    async def list_for_user(self, user_id: int, limit: int = 10) -> list[ActivityLogRead]:
        """Most recent entries recorded for a user, with the user's display name."""
        result = await self.db.execute(
            select(ActivityLog, User.name)
            .outerjoin(User, ActivityLog.user_id == User.id)
            .where(ActivityLog.user_id == user_id)
            .order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc())
            .limit(limit)
        )
        return [
            ActivityLogRead(
                id=entry.id,
                action=entry.action,
                timestamp=entry.timestamp,
                ip_address=entry.ip_address,
                user_name=user_name,
            )
            for entry, user_name in result.all()
        ]
