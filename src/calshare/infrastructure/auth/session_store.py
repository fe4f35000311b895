"""In-memory session store with TTL expiry."""

import logging
import secrets
import time
from collections.abc import Callable

from calshare.domain.entities import Session
from calshare.domain.exceptions import FieldError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 12


class SessionStore:
    """Maps opaque random tokens to sessions held server-side.

    Expiry is checked lazily: reading an expired token deletes it and reports
    it as absent. ``purge_expired`` reclaims memory for tokens nobody reads.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        now: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl_seconds
        self._now = now
        self._sessions: dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(self, user_id: str) -> Session:
        if not isinstance(user_id, str) or not user_id:
            raise ValidationError(
                "Validation failed", [FieldError("user_id", "user_id is required")]
            )
        self.purge_expired()
        now = self._now()
        session = Session(
            token=secrets.token_hex(16),
            user_id=user_id,
            created_at=now,
            expires_at=now + self._ttl,
        )
        self._sessions[session.token] = session
        return session

    def get_session(self, token: str | None) -> Session | None:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(self._now()):
            del self._sessions[token]
            logger.debug("Session for user %s expired", session.user_id)
            return None
        return session

    def delete_session(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None

    def purge_expired(self) -> int:
        """Drop every expired session. Returns how many were removed."""
        now = self._now()
        expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()
