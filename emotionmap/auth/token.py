"""Capability token guard for admin endpoints."""

import logging
import secrets

from litestar.connection import ASGIConnection
from litestar.exceptions import NotAuthorizedException
from litestar.handlers.base import BaseRouteHandler

logger = logging.getLogger("EmotionMap.auth")

ADMIN_TOKEN_HEADER = "X-Admin-Token"


def require_admin_token(connection: ASGIConnection, _: BaseRouteHandler) -> None:
    """Reject the request unless it carries the configured admin token.

    With no token configured every request is refused.
    """
    expected = connection.app.state.settings.admin_token
    if not expected:
        logger.warning(f"Admin access attempt on {connection.url.path} but ADMIN_TOKEN is not configured")
        raise NotAuthorizedException("Admin access is not configured")

    provided = connection.headers.get(ADMIN_TOKEN_HEADER, "")
    if not secrets.compare_digest(provided.encode(), expected.encode()):
        logger.warning(f"Rejected admin request on {connection.url.path}")
        raise NotAuthorizedException("Invalid admin token")
