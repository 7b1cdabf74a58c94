"""
FastAPI dependencies for the application.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.request_context import RequestContext, build_request_context
from app.core.session import session_manager
from app.db.session import get_db
from app.errors import ForbiddenError
from app.models.team import TeamMember
from app.models.user import User
from app.repositories.team_member_repository import TeamMemberRepository
from app.repositories.user_repository import UserRepository
from app.services.activity_logger import ActivityLogger, get_default_activity_logger
from app.services.task_service import TaskService


def get_request_context(request: Request) -> RequestContext:
    """Resolve the per-request values collaborators need (client IP)."""
    return build_request_context(request.headers)


def get_activity_logger() -> ActivityLogger:
    return get_default_activity_logger()


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get the current authenticated user from the session cookie.
    
    Raises:
        401: If the cookie is missing, invalid, expired, or the user is gone
    """
    token: Optional[str] = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    
    user_id = session_manager.verify_session_token(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )
    
    user = await UserRepository(db).get_active_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    
    return user


async def get_team_membership(
    team_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> TeamMember:
    """
    Require that the current user belongs to the team in the path.
    
    Raises:
        ForbiddenError: If the user has no membership on the team (403)
    """
    team_member = await TeamMemberRepository(db).get_membership(user.id, team_id)
    if team_member is None:
        raise ForbiddenError("You do not have access to this team")
    return team_member


def get_task_service(
    db: AsyncSession = Depends(get_db),
    activity_logger: ActivityLogger = Depends(get_activity_logger),
    context: RequestContext = Depends(get_request_context),
) -> TaskService:
    return TaskService(db, activity_logger, context=context)
