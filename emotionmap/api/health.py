"""Liveness probe."""

from typing import Dict

from litestar import get


@get("/health", sync_to_thread=False)
def health() -> Dict[str, str]:
    return {"status": "ok"}
