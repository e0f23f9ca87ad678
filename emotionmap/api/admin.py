"""Admin endpoints."""

import logging
from datetime import datetime
from typing import List

from litestar import Controller, get
from pydantic import BaseModel

from emotionmap.auth import require_admin_token
from emotionmap.storage import EmotionStore

logger = logging.getLogger("EmotionMap.admin")


class MessageListItem(BaseModel):
    """Contact message list item."""
    id: int
    name: str
    email: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True


class AdminController(Controller):
    """Admin listing of contact messages."""

    path = "/admin"
    tags = ["admin"]
    guards = [require_admin_token]

    @get("/messages")
    async def list_messages(self, store: EmotionStore) -> List[MessageListItem]:
        """Get all contact messages, newest first."""
        messages = await store.list_messages()
        logger.info(f"Admin listed {len(messages)} messages")
        return [MessageListItem.model_validate(m) for m in messages]
