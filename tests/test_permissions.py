"""Unit tests for the team role permission predicates."""

import pytest

from app.core.permissions import (
    CREATE_TASK_ROLES,
    MANAGE_TASK_ROLES,
    can_create_tasks,
    can_manage_tasks,
    check_role_permission,
    role_of,
)
from app.models import TeamMember, TeamRole

pytestmark = pytest.mark.unit


def member(role):
    return TeamMember(user_id=1, team_id=7, role=role)


@pytest.mark.parametrize(
    "role, can_manage, can_create",
    [
        (TeamRole.OWNER, True, True),
        (TeamRole.MEMBER, True, False),
        (TeamRole.VIEWER, False, False),
    ],
)
def test_role_matrix(role, can_manage, can_create):
    assert can_manage_tasks(member(role)) is can_manage
    assert can_create_tasks(member(role)) is can_create


def test_no_membership_is_denied_everything():
    assert can_manage_tasks(None) is False
    assert can_create_tasks(None) is False
    assert role_of(None) is None


def test_role_stored_as_plain_string_is_normalized():
    assert role_of(member("member")) is TeamRole.MEMBER
    assert can_manage_tasks(member("owner")) is True


def test_every_role_is_classified():
    # Creating is stricter than managing
    assert CREATE_TASK_ROLES <= MANAGE_TASK_ROLES
    assert TeamRole.VIEWER not in MANAGE_TASK_ROLES
    assert set(TeamRole) == MANAGE_TASK_ROLES | {TeamRole.VIEWER}


def test_check_role_permission_with_empty_allow_list():
    assert check_role_permission(TeamRole.OWNER, frozenset()) is False
