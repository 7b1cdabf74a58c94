"""
TeamMember repository - membership lookups.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.team import TeamMember


class TeamMemberRepository:
    """Repository for TeamMember database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_membership(self, user_id: int, team_id: int) -> Optional[TeamMember]:
        """Get the user's membership on a team, or None if they are not on it."""
        result = await self.db.execute(
            select(TeamMember)
            .where(
                TeamMember.user_id == user_id,
                TeamMember.team_id == team_id,
            )
            .limit(1)
        )
        return result.scalar_one_or_none()
