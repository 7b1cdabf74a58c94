"""
Base Pydantic schemas with common fields.

These are templates that other schemas inherit from.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TeamScopedRead(BaseModel):
    """
    Base schema for reading team-scoped data.
    
    Includes all the auto-generated fields like id, timestamps, etc.
    """
    
    id: int
    team_id: int
    created_at: datetime
    updated_at: datetime
    
    # This tells Pydantic to work with SQLAlchemy models
    model_config = ConfigDict(from_attributes=True)
