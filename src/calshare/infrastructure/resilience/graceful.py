"""Degraded-mode response shaping."""

DEFAULT_FALLBACK_MESSAGE = "Temporarily unavailable"


def graceful_error(error: BaseException | None, fallback_message: str | None = None) -> dict:
    """Safe response body for an upstream failure."""
    reason = str(error) if error is not None else ""
    return {
        "message": (
            fallback_message if fallback_message is not None else DEFAULT_FALLBACK_MESSAGE
        ),
        "reason": reason or "unknown",
        "status": "degraded",
    }
