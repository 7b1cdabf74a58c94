"""
Fire-and-forget audit trail for task mutations.

Entries are written in their own session after the task change has been
committed. Write failures are logged and dropped.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.request_context import RequestContext
from app.db.session import async_session_maker
from app.models.enums import ActivityType
from app.repositories.activity_log_repository import ActivityLogRepository
from app.utils.time import utc_now

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncSession]


class ActivityLogger:
    """Records an action against a team/user; never raises."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    async def log(
        self,
        team_id: int,
        user_id: int,
        action: ActivityType,
        context: Optional[RequestContext] = None,
    ) -> None:
        ip_address = context.client_ip if context is not None else None
        try:
            async with self.session_factory() as session:
                repo = ActivityLogRepository(session)
                await repo.create(
                    team_id=team_id,
                    user_id=user_id,
                    action=action,
                    ip_address=ip_address or settings.DEFAULT_CLIENT_IP,
                    timestamp=utc_now(),
                )
                await session.commit()
        except Exception:
            logger.exception(
                "Error logging activity %s for team %s user %s",
                getattr(action, "value", action), team_id, user_id,
            )


def get_default_activity_logger() -> ActivityLogger:
    return ActivityLogger(async_session_maker)
