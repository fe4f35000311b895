"""Update profile use case."""

from dataclasses import replace
from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.application.use_cases.auth.common import (
    ensure_organization_exists,
    normalize_email,
    normalize_optional_id,
)
from calshare.domain.entities import User
from calshare.domain.exceptions import Conflict, FieldError, NotFound
from calshare.domain.validation import (
    add_error,
    ensure_valid,
    validate_optional_string,
    validate_required_string,
)
from calshare.domain.value_objects import AuditStatus

PROFILE_FIELDS = ("name", "email", "organization_id", "role")


def validate_profile_update(payload: dict[str, Any]) -> None:
    errors: list[FieldError] = []
    if not any(key in payload for key in PROFILE_FIELDS):
        add_error(errors, "profile", "profile update requires at least one field")
        ensure_valid(errors)
    if "name" in payload:
        validate_required_string(payload["name"], "name", errors)
    if "email" in payload:
        validate_required_string(payload["email"], "email", errors)
    if "organization_id" in payload:
        validate_optional_string(payload["organization_id"], "organization_id", errors)
    if "role" in payload:
        validate_optional_string(payload["role"], "role", errors)
    ensure_valid(errors)


class UpdateProfileUseCase:
    """Update name, email, organization or role of the current user."""

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, user: User, payload: dict[str, Any]) -> User:
        validate_profile_update(payload)
        updates: dict[str, Any] = {}
        if "name" in payload:
            updates["name"] = payload["name"].strip()
        if "role" in payload:
            updates["role"] = (payload["role"] or "").strip() or user.role

        async with self._uow_factory() as uow:
            current = await uow.users.get_by_id(user.id)
            if not current:
                raise NotFound("User", user.id)
            if "email" in payload:
                email = normalize_email(payload["email"])
                if email != current.email and await uow.users.list(email=email):
                    raise Conflict("Email already registered")
                updates["email"] = email
            if "organization_id" in payload:
                organization_id = normalize_optional_id(payload["organization_id"])
                await ensure_organization_exists(uow, organization_id)
                updates["organization_id"] = organization_id
            updated = replace(current, **updates)
            await uow.users.update(updated)

        await self._audit.record(
            action="profile_update",
            actor_id=user.id,
            target_id=user.id,
            status=AuditStatus.SUCCESS,
            details="User profile updated",
        )
        return updated
