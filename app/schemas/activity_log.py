"""
ActivityLog Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.enums import ActivityType


class ActivityLogRead(BaseModel):
    """Schema for reading activity log data (API response)."""
    
    id: int
    action: ActivityType
    timestamp: datetime
    ip_address: str
    user_name: Optional[str] = None
    
    model_config = ConfigDict(from_attributes=True)
