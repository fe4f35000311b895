"""Application entry point and composition root."""

import argparse
import logging

from falcon.asgi import App

from calshare import __version__
from calshare.application.services.audit_service import AuditService
from calshare.config import Settings, get_settings
from calshare.infrastructure.auth.session_store import SessionStore
from calshare.infrastructure.persistence.memory import create_memory_uow_factory
from calshare.infrastructure.resilience import CircuitBreaker
from calshare.interfaces.api.app import Container, create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_container(settings: Settings) -> Container:
    """Pick the storage backend and build shared collaborators."""
    extra_middleware = []
    if settings.storage_backend == "postgres":
        from calshare.infrastructure.persistence.postgres.connection import create_pool
        from calshare.infrastructure.persistence.postgres.unit_of_work import (
            create_uow_factory,
        )
        from calshare.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

        pool = create_pool(settings.database_url)
        uow_factory = create_uow_factory(pool)
        extra_middleware.append(PoolLifespanMiddleware(pool))
    else:
        uow_factory = create_memory_uow_factory()

    return Container(
        unit_of_work_factory=uow_factory,
        audit_service=AuditService(unit_of_work_factory=uow_factory),
        session_store=SessionStore(ttl_seconds=settings.session_ttl_seconds),
        breaker=CircuitBreaker(
            failure_threshold=settings.breaker_failure_threshold,
            success_threshold=settings.breaker_success_threshold,
            cooldown_ms=settings.breaker_cooldown_ms,
            name="storage",
        ),
        storage_mode=settings.storage_backend,
        cors_origins=settings.cors_origin_list,
        health_retries=settings.health_retries,
        health_retry_delay_ms=settings.health_retry_delay_ms,
        extra_middleware=extra_middleware,
    )


def create_calshare_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting calshare v%s (%s, storage=%s)",
        __version__,
        settings.environment,
        settings.storage_backend,
    )
    return create_app(build_container(settings))


def run_server(host: str | None = None, port: int | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_calshare_app(settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="calshare", description="Calendar sharing API")
    parser.add_argument("--version", action="version", version=f"calshare {__version__}")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)
    run_server(args.host, args.port)


if __name__ == "__main__":
    main()
