"""Logging helpers with conditional debug output and request context."""

import logging
from typing import Any, Optional

logger = logging.getLogger("EmotionMap")


def _debug_enabled() -> bool:
    return logger.isEnabledFor(logging.DEBUG)


def debug_log(message: str, *args, **kwargs) -> None:
    """
    Log a debug message only when debug logging is enabled.

    Args:
        message: Log message (supports % formatting)
        *args: Positional arguments for message formatting
        **kwargs: Keyword arguments (level, exc_info, etc.)
    """
    if _debug_enabled():
        level = kwargs.pop("level", logging.DEBUG)
        logger.log(level, message, *args, **kwargs)


def error_log(
    message: str,
    exc: Optional[BaseException] = None,
    context: Optional[dict] = None,
) -> None:
    """
    Log an error with context and, for exceptions, the full cause chain.

    Args:
        message: Error message
        exc: Optional exception object
        context: Optional dictionary with request details
    """
    parts = [message]

    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        parts.append(f"Context: {context_str}")

    if exc:
        parts.append(f"Exception: {type(exc).__name__}: {exc}")
        cause = exc.__cause__
        if cause is not None:
            parts.append(f"Caused by: {type(cause).__name__}: {cause}")

    full_message = " | ".join(parts)

    if exc:
        logger.error(full_message, exc_info=exc)
    else:
        logger.error(full_message)


def log_request_error(
    request: Any,
    exc: BaseException,
    message: Optional[str] = None,
) -> None:
    """
    Log an error with request context.

    Args:
        request: Request object (should have url, method, headers)
        exc: The exception
        message: Optional custom message
    """
    context = {}
    if hasattr(request, "url"):
        context["path"] = getattr(request.url, "path", str(request.url))
    if hasattr(request, "method"):
        context["method"] = request.method
    if hasattr(request, "headers"):
        context["user_agent"] = request.headers.get("user-agent", "unknown")

    error_log(message or f"Unhandled exception: {type(exc).__name__}", exc=exc, context=context)
