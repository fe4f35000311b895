"""Unit tests for PermissionEvaluator."""

from unittest.mock import AsyncMock

import pytest

from calshare.application.ports import AuditContext
from calshare.application.services.audit_service import AuditService
from calshare.domain.value_objects import AuditStatus, CalendarPermission
from calshare.infrastructure.permission.permission_evaluator import (
    PermissionEvaluator,
    evaluate_permissions,
    flatten_permissions,
    first_present,
    is_present,
)

from tests.conftest import make_grant, seed

VIEW = CalendarPermission.VIEW.value
MANAGE = CalendarPermission.MANAGE.value
ADD = CalendarPermission.ADD.value


# --- evaluate_permissions ---


def test_unspecified_requirement_fails_closed() -> None:
    """No anyOf and no allOf never grants, whatever is held."""
    everything = [p.value for p in CalendarPermission]
    assert evaluate_permissions(everything, None) is False
    assert evaluate_permissions(everything, {"anyOf": [], "allOf": []}) is False
    assert evaluate_permissions(everything, 123) is False


def test_single_permission_membership() -> None:
    assert evaluate_permissions([VIEW], VIEW) is True
    assert evaluate_permissions([VIEW], MANAGE) is False
    assert evaluate_permissions([], VIEW) is False


def test_any_of_needs_one_match() -> None:
    assert evaluate_permissions([ADD], [VIEW, ADD]) is True
    assert evaluate_permissions([MANAGE], [VIEW, ADD]) is False


def test_all_of_needs_every_permission() -> None:
    requirement = {"allOf": [VIEW, ADD]}
    assert evaluate_permissions([VIEW, ADD, MANAGE], requirement) is True
    assert evaluate_permissions([VIEW], requirement) is False


def test_any_of_and_all_of_combined() -> None:
    requirement = {"anyOf": [VIEW, ADD], "allOf": [MANAGE]}
    assert evaluate_permissions([ADD, MANAGE], requirement) is True
    assert evaluate_permissions([MANAGE], requirement) is False
    assert evaluate_permissions([ADD], requirement) is False


def test_non_collection_granted_counts_as_empty() -> None:
    assert evaluate_permissions(None, VIEW) is False
    assert evaluate_permissions(VIEW, VIEW) is False
    assert evaluate_permissions(frozenset({VIEW}), VIEW) is True


def test_presence_is_explicit() -> None:
    """"0" is a valid id; only None and "" are absent."""
    assert is_present("0")
    assert is_present(0)
    assert not is_present("")
    assert not is_present(None)
    assert first_present(None, "", "0", "x") == "0"
    assert first_present(None, "") is None


def test_flatten_permissions_dedupes_in_order() -> None:
    grants = [
        make_grant(calendar_id="cal-1", permissions=[VIEW, ADD]),
        make_grant(calendar_id="cal-2", permissions=[ADD, MANAGE]),
    ]
    assert flatten_permissions(grants) == [VIEW, ADD, MANAGE]


def test_flatten_permissions_skips_entries_without_list() -> None:
    class Broken:
        permissions = None

    assert flatten_permissions([Broken(), make_grant(permissions=[VIEW])]) == [VIEW]


# --- PermissionEvaluator.evaluate ---


@pytest.mark.asyncio
async def test_evaluate_missing_permission_is_denied_and_audited(store, uow_factory) -> None:
    """View grant does not satisfy Manage; one denied entry is written."""
    seed(store, make_grant("u1", "c1", [VIEW]))
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)

    result = await evaluator.evaluate("u1", "c1", MANAGE)

    assert result.allowed is False
    assert result.reason == "missing permission"
    assert result.permissions == [VIEW]
    entries = audit.list()
    assert len(entries) == 1
    assert entries[0].status == AuditStatus.DENIED
    assert entries[0].action == "permission_check"
    assert entries[0].actor_id == "u1"
    assert entries[0].target_id == "c1"
    assert entries[0].details == "Missing permission (anyOf: Manage Calendar)"


@pytest.mark.asyncio
async def test_evaluate_any_of_allows(store, uow_factory) -> None:
    seed(store, make_grant("u1", "c1", [VIEW]))
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)

    result = await evaluator.evaluate("u1", "c1", {"anyOf": [VIEW, MANAGE]})

    assert result.allowed is True
    assert result.reason == "allowed"
    [entry] = audit.list()
    assert entry.status == AuditStatus.ALLOWED
    assert entry.details == "Permission granted (anyOf: View Calendar, Manage Calendar)"


@pytest.mark.asyncio
async def test_evaluate_requirement_with_non_string_entries(store, uow_factory) -> None:
    """Odd entries in a requirement are described, not fatal."""
    seed(store, make_grant("u1", "c1", [MANAGE]), make_grant("u2", "c1", [VIEW]))
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)

    denied = await evaluator.evaluate("u1", "c1", [VIEW, None])
    allowed = await evaluator.evaluate("u2", "c1", {"anyOf": [VIEW, 3, ["x"]]})

    assert denied.allowed is False
    assert allowed.allowed is True
    first, second = audit.list()
    assert first.details == "Missing permission (anyOf: View Calendar, )"
    assert second.details == "Permission granted (anyOf: View Calendar, 3, ['x'])"


@pytest.mark.asyncio
async def test_evaluate_missing_user_is_anonymous_denial(uow_factory) -> None:
    audit = AuditService()
    grants = AsyncMock()
    evaluator = PermissionEvaluator(uow_factory, audit)
    evaluator.list_permissions = grants

    result = await evaluator.evaluate(None, "c1", VIEW)

    assert result.allowed is False
    assert result.reason == "Missing user or calendar"
    assert result.permissions == []
    grants.assert_not_called()
    [entry] = audit.list()
    assert entry.actor_id == "anonymous"
    assert entry.target_id == "c1"
    assert entry.details == "Missing user or calendar"


@pytest.mark.asyncio
async def test_evaluate_missing_calendar_targets_unknown(uow_factory) -> None:
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)

    result = await evaluator.evaluate("u1", "", VIEW)

    assert result.allowed is False
    assert audit.list()[0].target_id == "unknown"


@pytest.mark.asyncio
async def test_evaluate_zero_ids_are_present(store, uow_factory) -> None:
    """Ids "0" are real ids, not missing ones."""
    seed(store, make_grant("0", "0", [VIEW]))
    evaluator = PermissionEvaluator(uow_factory)

    result = await evaluator.evaluate("0", "0", VIEW)

    assert result.allowed is True


@pytest.mark.asyncio
async def test_evaluate_unspecified_requirement_denies(store, uow_factory) -> None:
    seed(store, make_grant("u1", "c1"))
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)

    result = await evaluator.evaluate("u1", "c1", None)

    assert result.allowed is False
    assert audit.list()[0].details == "Missing permission (unspecified permission requirement)"


@pytest.mark.asyncio
async def test_evaluate_grants_scoped_to_calendar(store, uow_factory) -> None:
    seed(store, make_grant("u1", "c1", [MANAGE]))
    evaluator = PermissionEvaluator(uow_factory)

    assert (await evaluator.evaluate("u1", "c1", MANAGE)).allowed is True
    assert (await evaluator.evaluate("u1", "c2", MANAGE)).allowed is False


@pytest.mark.asyncio
async def test_evaluate_is_idempotent(store, uow_factory) -> None:
    """Same inputs and grants give the same decision every time."""
    seed(store, make_grant("u1", "c1", [VIEW, ADD]))
    evaluator = PermissionEvaluator(uow_factory)
    requirement = {"anyOf": [VIEW], "allOf": [ADD]}

    first = await evaluator.evaluate("u1", "c1", requirement)
    second = await evaluator.evaluate("u1", "c1", requirement)

    assert first == second


@pytest.mark.asyncio
async def test_evaluate_respects_log_flags(store, uow_factory) -> None:
    seed(store, make_grant("u1", "c1", [VIEW]))
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)

    await evaluator.evaluate("u1", "c1", VIEW, AuditContext(log_allowed=False))
    await evaluator.evaluate("u1", "c1", MANAGE, AuditContext(log_denied=False))
    await evaluator.evaluate(None, "c1", VIEW, AuditContext(log_denied=False))

    assert audit.list() == []


@pytest.mark.asyncio
async def test_evaluate_audit_context_overrides(store, uow_factory) -> None:
    seed(store, make_grant("u1", "c1", [VIEW]))
    audit = AuditService()
    evaluator = PermissionEvaluator(uow_factory, audit)
    context = AuditContext(
        action="event_view", actor_id="actor", target_id="target", details="custom"
    )

    await evaluator.evaluate("u1", "c1", VIEW, context)

    [entry] = audit.list()
    assert (entry.action, entry.actor_id, entry.target_id, entry.details) == (
        "event_view",
        "actor",
        "target",
        "custom",
    )


@pytest.mark.asyncio
async def test_evaluate_without_repository_always_denies() -> None:
    evaluator = PermissionEvaluator()

    result = await evaluator.evaluate("u1", "c1", VIEW)

    assert result.allowed is False
    assert result.permissions == []


@pytest.mark.asyncio
async def test_evaluate_propagates_repository_errors() -> None:
    """Storage failures are not turned into denials."""

    class BrokenUow:
        async def __aenter__(self):
            raise ConnectionError("db down")

        async def __aexit__(self, *exc):
            return False

    evaluator = PermissionEvaluator(lambda: BrokenUow(), AuditService())

    with pytest.raises(ConnectionError, match="db down"):
        await evaluator.evaluate("u1", "c1", VIEW)


@pytest.mark.asyncio
async def test_list_permissions_across_calendars(store, uow_factory) -> None:
    seed(
        store,
        make_grant("u1", "c1", [VIEW]),
        make_grant("u1", "c2", [VIEW, MANAGE]),
        make_grant("u2", "c1", [ADD]),
    )
    evaluator = PermissionEvaluator(uow_factory)

    assert await evaluator.list_permissions("u1") == [VIEW, MANAGE]
    assert await evaluator.list_permissions("u1", "c1") == [VIEW]
    assert await evaluator.list_permissions(None) == []


def test_permission_sets() -> None:
    sets = PermissionEvaluator.permission_sets
    assert set(sets["view"]) == {VIEW, CalendarPermission.VIEW_TIMES_ONLY.value, ADD}
    assert set(sets["share_view"]) == {VIEW, CalendarPermission.VIEW_TIMES_ONLY.value}
