"""Register user use case."""

from dataclasses import dataclass
from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.application.use_cases.auth.common import (
    ensure_organization_exists,
    normalize_email,
    normalize_optional_id,
)
from calshare.application.use_cases.calendar.provision import create_owned_calendar
from calshare.domain.entities import Calendar, Session, User
from calshare.domain.exceptions import Conflict, FieldError
from calshare.domain.identifiers import new_id
from calshare.domain.validation import (
    add_error,
    ensure_valid,
    validate_optional_string,
    validate_required_string,
)
from calshare.domain.value_objects import AuditStatus
from calshare.infrastructure.auth.passwords import hash_password
from calshare.infrastructure.auth.session_store import SessionStore

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72


@dataclass
class AuthResult:
    """Session token plus the authenticated user."""

    session: Session
    user: User

    def to_dict(self) -> dict:
        return {"token": self.session.token, "user": self.user.to_public_dict()}


def validate_registration(payload: dict[str, Any], organization_id: object) -> None:
    errors: list[FieldError] = []
    password = payload.get("password")
    validate_required_string(payload.get("name"), "name", errors)
    validate_required_string(payload.get("email"), "email", errors)
    validate_required_string(password, "password", errors)
    validate_optional_string(organization_id, "organization_id", errors)
    if isinstance(password, str) and 0 < len(password.strip()) < MIN_PASSWORD_LENGTH:
        add_error(
            errors, "password", f"password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    elif isinstance(password, str) and len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        add_error(errors, "password", f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    ensure_valid(errors)


class RegisterUserUseCase:
    """Create an account with its default calendar and open a session."""

    def __init__(
        self,
        unit_of_work_factory: type,
        session_store: SessionStore,
        audit_service: AuditService,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._sessions = session_store
        self._audit = audit_service

    async def execute(self, payload: dict[str, Any]) -> AuthResult:
        """Raises ValidationError, Conflict (duplicate email) or NotFound (organization)."""
        organization_id = normalize_optional_id(payload.get("organization_id"))
        validate_registration(payload, organization_id)
        email = normalize_email(payload["email"])

        async with self._uow_factory() as uow:
            if await uow.users.list(email=email):
                raise Conflict("Email already registered")
            await ensure_organization_exists(uow, organization_id)
            user = User(
                id=new_id("user"),
                name=payload["name"].strip(),
                email=email,
                organization_id=organization_id,
                role=payload.get("role") or "member",
                password_hash=hash_password(payload["password"]),
            )
            await uow.users.create(user)
            await create_owned_calendar(
                uow,
                Calendar(id=new_id("cal"), name=f"{user.name}'s Calendar", owner_id=user.id),
                user,
            )

        session = self._sessions.create_session(user.id)
        await self._audit.record(
            action="register",
            actor_id=user.id,
            target_id=user.id,
            status=AuditStatus.SUCCESS,
            details="User registered",
        )
        return AuthResult(session=session, user=user)
