"""
Base model with common fields.

All team-scoped tables inherit from this to get:
- id (integer primary key, assigned by the database)
- team_id (which team owns the row)
- created_at (when the record was created)
- updated_at (when the record was last modified)
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class TeamScopedModel(Base):
    """
    Abstract base class for all team-scoped models.
    
    This is not a real table - it's a template that other models inherit from.
    """
    
    __abstract__ = True  # This means: don't create a table for this class
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    # Indexed for fast lookups when filtering by team
    team_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("teams.id"),
        nullable=False,
        index=True,
    )
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
