"""Admin access control."""

from emotionmap.auth.token import ADMIN_TOKEN_HEADER, require_admin_token

__all__ = ["ADMIN_TOKEN_HEADER", "require_admin_token"]
