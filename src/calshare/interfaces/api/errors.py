"""Map domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from calshare.domain.exceptions import (
    AuthenticationRequired,
    Conflict,
    InvalidCredentials,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from calshare.infrastructure.resilience import CircuitOpenError, graceful_error

logger = logging.getLogger(__name__)


async def handle_permission_denied(req, resp, ex, params) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Permission denied"}


async def handle_validation_error(req, resp, ex: ValidationError, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": ex.message, "details": [d.to_dict() for d in ex.details]}


async def handle_not_found(req, resp, ex: NotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


async def handle_conflict(req, resp, ex: Conflict, params) -> None:
    resp.status = falcon.HTTP_409
    resp.media = {"error": str(ex)}


async def handle_authentication_required(req, resp, ex, params) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Authentication required"}


async def handle_invalid_credentials(req, resp, ex, params) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Invalid credentials"}


async def handle_circuit_open(req, resp, ex: CircuitOpenError, params) -> None:
    resp.status = falcon.HTTP_503
    resp.media = graceful_error(ex)


async def handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install handlers; Falcon picks the most specific match per exception."""
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(PermissionDenied, handle_permission_denied)
    app.add_error_handler(ValidationError, handle_validation_error)
    app.add_error_handler(NotFound, handle_not_found)
    app.add_error_handler(Conflict, handle_conflict)
    app.add_error_handler(AuthenticationRequired, handle_authentication_required)
    app.add_error_handler(InvalidCredentials, handle_invalid_credentials)
    app.add_error_handler(CircuitOpenError, handle_circuit_open)
