"""
ActivityLog model.

Append-only audit trail of task mutations, one row per successful operation.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, Enum, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.enums import ActivityType, enum_values


class ActivityLog(Base):
    """ActivityLog table - who did what to which team, from where, and when."""
    
    __tablename__ = "activity_logs"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    team_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("teams.id"),
        nullable=False,
        index=True,
    )
    
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    
    action: Mapped[ActivityType] = mapped_column(
        Enum(ActivityType, name="activity_type", native_enum=False, values_callable=enum_values, length=50),
        nullable=False,
    )
    
    # Source address as reported by the proxy headers (IPv6 fits in 45 chars)
    ip_address: Mapped[str] = mapped_column(
        String(45),
        nullable=False,
    )
    
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
