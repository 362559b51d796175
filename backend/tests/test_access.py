from __future__ import annotations

import pytest

from store_rating.api.access import ROLE_NOT_FOUND_MSG, check_role
from store_rating.api.deps import CurrentUser
from store_rating.core.errors import ForbiddenError
from store_rating.models.enums import UserRole


def test_missing_identity_is_forbidden_not_a_crash():
    with pytest.raises(ForbiddenError) as exc:
        check_role(None, UserRole.system_administrator)
    assert exc.value.status_code == 403
    assert exc.value.msg == ROLE_NOT_FOUND_MSG


def test_unknown_role_string_is_forbidden():
    user = CurrentUser(id=1, name="x", role="system_administrator")
    with pytest.raises(ForbiddenError) as exc:
        check_role(user, UserRole.system_administrator)
    assert exc.value.msg == ROLE_NOT_FOUND_MSG


def test_role_mismatch_is_forbidden():
    user = CurrentUser(id=1, name="x", role=UserRole.store_owner.value)
    with pytest.raises(ForbiddenError):
        check_role(user, UserRole.system_administrator)


def test_matching_role_passes():
    user = CurrentUser(id=1, name="x", role=UserRole.system_administrator.value)
    check_role(user, UserRole.system_administrator)


def test_role_parse_round_trips_display_strings():
    for role in UserRole:
        assert UserRole.parse(role.value) is role
    assert UserRole.parse("normal_user") is None
    assert UserRole.parse(None) is None
