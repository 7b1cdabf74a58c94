"""
User model.

Users are created and authenticated elsewhere; this service only reads them.
"""

from datetime import datetime
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.team import TeamMember


class User(Base):
    """
    User table - represents authenticated users in the system.
    
    A user is soft-deleted by setting deleted_at; such users can no longer act.
    """
    
    __tablename__ = "users"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )
    
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    
    memberships: Mapped[List["TeamMember"]] = relationship(
        "TeamMember",
        back_populates="user",
    )
