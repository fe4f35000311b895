"""Session entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Server-side session behind an opaque token. Times are epoch seconds."""

    token: str
    user_id: str
    created_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "user_id": self.user_id,
            "created_at": self.created_at,
            "expires_at": self.expires_at,
        }
