"""Request helpers shared by resources."""

from typing import Any

import falcon.asgi

from calshare.domain.exceptions import FieldError, ValidationError


async def read_json(req: falcon.asgi.Request) -> dict[str, Any]:
    """JSON object body; an empty body reads as ``{}``."""
    body = await req.get_media(default_when_empty=None)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError(
            "Validation failed", [FieldError("body", "body must be a JSON object")]
        )
    return dict(body)
