"""Login use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.application.use_cases.auth.common import normalize_email
from calshare.application.use_cases.auth.register import AuthResult
from calshare.domain.exceptions import FieldError, InvalidCredentials, NotFound
from calshare.domain.validation import ensure_valid, validate_required_string
from calshare.domain.value_objects import AuditStatus
from calshare.infrastructure.auth.passwords import verify_password
from calshare.infrastructure.auth.session_store import SessionStore


class LoginUseCase:
    """Exchange email and password for a session token."""

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
        errors: list[FieldError] = []
        validate_required_string(payload.get("email"), "email", errors)
        validate_required_string(payload.get("password"), "password", errors)
        ensure_valid(errors)

        async with self._uow_factory() as uow:
            matches = await uow.users.list(email=normalize_email(payload["email"]))
        if not matches:
            raise NotFound("User")
        user = matches[0]
        if not verify_password(payload["password"], user.password_hash):
            raise InvalidCredentials("Invalid credentials")

        session = self._sessions.create_session(user.id)
        await self._audit.record(
            action="login",
            actor_id=user.id,
            target_id=user.id,
            status=AuditStatus.SUCCESS,
            details="User logged in",
        )
        return AuthResult(session=session, user=user)
