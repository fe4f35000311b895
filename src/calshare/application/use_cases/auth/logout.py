"""Logout use case."""

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Session, User
from calshare.domain.value_objects import AuditStatus
from calshare.infrastructure.auth.session_store import SessionStore


class LogoutUseCase:
    def __init__(self, session_store: SessionStore, audit_service: AuditService) -> None:
        self._sessions = session_store
        self._audit = audit_service

    async def execute(self, user: User, session: Session) -> None:
        self._sessions.delete_session(session.token)
        await self._audit.record(
            action="logout",
            actor_id=user.id,
            target_id=user.id,
            status=AuditStatus.SUCCESS,
            details="User logged out",
        )
