"""Application factory for the EmotionMap service."""

import logging
from typing import Optional

from advanced_alchemy.extensions.litestar import SQLAlchemyAsyncConfig, SQLAlchemyInitPlugin
from litestar import Litestar, Request
from litestar.config.cors import CORSConfig
from litestar.datastructures import State
from litestar.di import Provide
from litestar.enums import MediaType
from litestar.exceptions import HTTPException, SerializationException, ValidationException
from litestar.response import Response
from litestar.static_files import create_static_files_router
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from emotionmap.api import AdminController, ContactController, MarkersController, health
from emotionmap.config import Settings
from emotionmap.errors import StorageError, ValidationFailed
from emotionmap.models import Base
from emotionmap.storage import provide_store
from emotionmap.utils.logging import log_request_error

logger = logging.getLogger("EmotionMap")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


# --- Exception handlers

def error_response(request: Request, message: str, status_code: int) -> Response:
    """Plain text under /admin, ``{"error": ...}`` JSON everywhere else."""
    if request.url.path.startswith("/admin"):
        return Response(content=message, status_code=status_code, media_type=MediaType.TEXT)
    return Response(content={"error": message}, status_code=status_code, media_type=MediaType.JSON)


def handle_validation_failed(request: Request, exc: ValidationFailed) -> Response:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return error_response(request, exc.message, HTTP_400_BAD_REQUEST)


def handle_bad_body(request: Request, exc: Exception) -> Response:
    """Undecodable or wrongly typed request body."""
    logger.info(f"Rejected {request.method} {request.url.path}: unreadable body ({exc})")
    return error_response(request, "Invalid data", HTTP_400_BAD_REQUEST)


def handle_storage_error(request: Request, exc: StorageError) -> Response:
    log_request_error(request, exc, message="Storage failure")
    return error_response(request, exc.public_message, HTTP_500_INTERNAL_SERVER_ERROR)


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        log_request_error(request, exc)
        return error_response(request, "Server error", exc.status_code)
    return error_response(request, exc.detail, exc.status_code)


def log_exceptions(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return error_response(request, "Server error", HTTP_500_INTERNAL_SERVER_ERROR)


# --- App factory

def create_app(settings: Optional[Settings] = None) -> Litestar:
    """Build the Litestar application.

    The SQLAlchemy engine (and its pool) is owned by the plugin config and
    shared by every request; handlers receive a per-request store through
    the ``store`` dependency.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.debug)

    logger.info(f"Starting app in {'DEBUG' if settings.debug else 'PRODUCTION'} mode")
    logger.info(f"Database URL: {settings.masked_database_url}")
    if not settings.admin_token:
        logger.warning("ADMIN_TOKEN is not set; /admin/messages will refuse every request")

    db_config = SQLAlchemyAsyncConfig(
        connection_string=settings.database_url,
        session_dependency_key="session",
        metadata=Base.metadata,
        create_all=settings.create_all,
    )

    route_handlers = [MarkersController, ContactController, AdminController, health]
    if settings.client_dir.is_dir():
        route_handlers.append(
            create_static_files_router(
                path="/",
                directories=[settings.client_dir],
                html_mode=True,
                name="client",
            )
        )
    else:
        logger.info(f"Client directory {settings.client_dir} not found; serving API only")

    return Litestar(
        route_handlers=route_handlers,
        debug=settings.debug,
        plugins=[SQLAlchemyInitPlugin(db_config)],
        dependencies={"store": Provide(provide_store)},
        cors_config=CORSConfig(allow_origins=settings.cors_origins),
        state=State({"settings": settings}),
        exception_handlers={
            ValidationFailed: handle_validation_failed,
            ValidationException: handle_bad_body,
            SerializationException: handle_bad_body,
            StorageError: handle_storage_error,
            HTTPException: handle_http_exception,
            Exception: log_exceptions,
        },
    )
