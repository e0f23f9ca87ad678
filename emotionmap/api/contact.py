"""Contact form API endpoint."""

import logging
from typing import Any, Dict

from litestar import Controller, post
from litestar.status_codes import HTTP_200_OK
from pydantic import BaseModel

from emotionmap.storage import EmotionStore
from emotionmap.validation import validate_contact

logger = logging.getLogger("EmotionMap.contact")

THANK_YOU = "Thank you! Your message has been sent."


class ContactResponse(BaseModel):
    """Response after submitting a contact message."""
    success: bool
    message: str


class ContactController(Controller):
    """API endpoint for visitor contact messages."""

    path = "/api/contact"
    tags = ["contact"]

    @post("/", status_code=HTTP_200_OK)
    async def submit_contact(self, data: Dict[str, Any], store: EmotionStore) -> ContactResponse:
        """Submit a contact message."""
        message = validate_contact(data)
        await store.insert_message(message)
        logger.info(f"Contact message saved from {message.email} ({message.name})")
        return ContactResponse(success=True, message=THANK_YOU)
