"""
Role-based permission helpers for team tasks.

Roles come from the caller's TeamMember row on the team being acted on.
A user with no membership row has no role and is denied everything.
"""

from typing import FrozenSet, Optional

from app.models.enums import TeamRole
from app.models.team import TeamMember


# Role capabilities matrix
# owner:  create, update, delete, toggle
# member: update, delete, toggle
# viewer: read-only
# (none): nothing
MANAGE_TASK_ROLES: FrozenSet[TeamRole] = frozenset({TeamRole.OWNER, TeamRole.MEMBER})
CREATE_TASK_ROLES: FrozenSet[TeamRole] = frozenset({TeamRole.OWNER})


def role_of(team_member: Optional[TeamMember]) -> Optional[TeamRole]:
    """Return the member's role, or None when the user is not on the team."""
    if team_member is None:
        return None
    return TeamRole(team_member.role)


def check_role_permission(role: Optional[TeamRole], allowed_roles: FrozenSet[TeamRole]) -> bool:
    """
    Check if a role is in the set of allowed roles.
    
    Args:
        role: The user's role on the team, or None if not a member
        allowed_roles: Roles that are permitted
        
    Returns:
        True if the role is permitted, False otherwise
    """
    if role is None:
        return False
    return role in allowed_roles


def can_manage_tasks(team_member: Optional[TeamMember]) -> bool:
    """Check if the member can update, delete or toggle the team's tasks."""
    return check_role_permission(role_of(team_member), MANAGE_TASK_ROLES)


def can_create_tasks(team_member: Optional[TeamMember]) -> bool:
    """Check if the member can create tasks on the team (owners only)."""
    return check_role_permission(role_of(team_member), CREATE_TASK_ROLES)
