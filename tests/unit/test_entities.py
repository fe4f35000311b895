"""Unit tests for entity validation."""

from datetime import UTC, datetime, timedelta

import pytest

from calshare.domain.entities import CalendarPermissions, Event, Organization, Role, RoleAssignment
from calshare.domain.exceptions import ValidationError
from calshare.domain.validation import parse_datetime
from calshare.domain.value_objects import CalendarPermission

from tests.conftest import make_calendar, make_event, make_share_token, make_user


def _fields(exc_info) -> set[str]:
    return {d.field for d in exc_info.value.details}


def test_user_requires_name_and_email() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_user(name="", email=None)
    assert _fields(exc_info) == {"name", "email"}


def test_user_public_dict_hides_password_hash() -> None:
    user = make_user(password_hash="salt:abc")
    assert "password_hash" not in user.to_public_dict()


def test_calendar_owner_type_must_be_known() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_calendar(owner_type="team")
    assert _fields(exc_info) == {"owner_type"}


def test_calendar_is_owned_by_owner_and_shared_owners() -> None:
    calendar = make_calendar(owner_id="u1", shared_owner_ids=["u2"])
    assert calendar.is_owned_by("u1")
    assert calendar.is_owned_by("u2")
    assert not calendar.is_owned_by("u3")


def test_calendar_is_public_must_be_boolean() -> None:
    with pytest.raises(ValidationError):
        make_calendar(is_public="yes")


def test_event_needs_a_calendar() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_event(calendar_ids=[])
    assert "calendar_ids" in _fields(exc_info)


def test_event_cannot_end_before_it_starts() -> None:
    start = datetime(2026, 1, 1, 10, tzinfo=UTC)
    with pytest.raises(ValidationError):
        make_event(starts_at=start, ends_at=start - timedelta(minutes=1))


def test_event_rejects_unparsed_dates() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Event(
            id="e1",
            title="x",
            calendar_ids=["c1"],
            starts_at="tomorrow",
            ends_at=None,
            created_by="u1",
        )
    assert {"starts_at", "ends_at"} <= _fields(exc_info)


def test_grant_rejects_unknown_permission() -> None:
    with pytest.raises(ValidationError) as exc_info:
        CalendarPermissions(
            id="p1", calendar_id="c1", user_id="u1", granted_by="u1", permissions=["Delete All"]
        )
    assert exc_info.value.details[0].message == "Invalid permission: Delete All"


def test_grant_requires_at_least_one_permission() -> None:
    with pytest.raises(ValidationError):
        CalendarPermissions(id="p1", calendar_id="c1", user_id="u1", granted_by="u1", permissions=[])


def test_grant_stores_plain_strings() -> None:
    grant = CalendarPermissions(
        id="p1",
        calendar_id="c1",
        user_id="u1",
        granted_by="u1",
        permissions=[CalendarPermission.VIEW],
    )
    assert grant.permissions == ["View Calendar"]
    assert type(grant.permissions[0]) is str


def test_organization_defaults() -> None:
    org = Organization(id="org-1", name="Acme")
    assert org.roles == ["owner", "admin", "member"]


def test_parse_datetime() -> None:
    assert parse_datetime("2026-01-05T09:00:00Z") == datetime(2026, 1, 5, 9, tzinfo=UTC)
    assert parse_datetime("2026-01-05T09:00:00") == datetime(2026, 1, 5, 9, tzinfo=UTC)
    assert parse_datetime("not a date") == "not a date"
    assert parse_datetime(None) is None


def test_share_token_rejects_unknown_permission() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_share_token(permissions=["View Calendar", "Export Everything"])
    assert [d.message for d in exc_info.value.details] == [
        "Invalid permission: Export Everything"
    ]


def test_share_token_needs_permissions() -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_share_token(permissions=[])
    assert _fields(exc_info) == {"permissions"}


def test_share_token_viewing_and_expiry() -> None:
    now = datetime(2026, 3, 1, tzinfo=UTC)
    times_only = make_share_token(permissions=[CalendarPermission.VIEW_TIMES_ONLY])
    comment = make_share_token(permissions=["Comment on Calendar"])
    expiring = make_share_token(expires_at=now)

    assert times_only.allows_viewing()
    assert times_only.permissions == ["View Calendar - Times Only"]
    assert not comment.allows_viewing()
    assert not times_only.is_expired(now)
    assert expiring.is_expired(now)
    assert not expiring.is_expired(now - timedelta(seconds=1))


def test_role_requires_name_and_permissions() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Role(id="r1", organization_id="org-1", name=" ", permissions=[""])
    assert _fields(exc_info) == {"name", "permissions"}


def test_role_assignment_requires_every_reference() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RoleAssignment(id="a1", organization_id="org-1", role_id="", user_id=None, assigned_by="u1")
    assert _fields(exc_info) == {"role_id", "user_id"}
