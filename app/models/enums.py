"""
Closed enumerations shared by models, schemas and permission checks.
"""

import enum


class TeamRole(str, enum.Enum):
    """Role a user holds on a team. Users with no membership row have no role."""

    OWNER = "owner"
    MEMBER = "member"
    VIEWER = "viewer"


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> "TaskStatus":
        if self is TaskStatus.PENDING:
            return TaskStatus.COMPLETED
        return TaskStatus.PENDING


class ActivityType(str, enum.Enum):
    """Audit actions recorded for task mutations."""

    CREATE_TASK = "CREATE_TASK"
    UPDATE_TASK = "UPDATE_TASK"
    DELETE_TASK = "DELETE_TASK"


def enum_values(enum_cls):
    """values_callable for SQLAlchemy Enum columns: persist values, not names."""
    return [member.value for member in enum_cls]
