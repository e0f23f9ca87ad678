"""Validation of inbound marker and contact payloads.

Both validators are pure: they take the decoded JSON body, raise a
``ValidationFailed`` subclass on bad input and otherwise return the
normalized values ready for storage.
"""

import math
import re
from typing import Any, Mapping

from pydantic import BaseModel

from emotionmap.errors import InvalidEmail, InvalidInput, MessageTooLong
from emotionmap.models.marker import Emotion

EMOTIONS = frozenset(e.value for e in Emotion)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MAX_MESSAGE_LENGTH = 1000

INVALID_MARKER = "Invalid data"
MISSING_CONTACT_FIELDS = "All fields are required"
BAD_EMAIL = "Invalid email format"
TOO_LONG = "Message is too long"


class NewMarker(BaseModel):
    """Marker values that passed validation."""
    lat: float
    lng: float
    emotion: str
    comment: str = ""


class NewMessage(BaseModel):
    """Contact message values that passed validation, already trimmed."""
    name: str
    email: str
    message: str


def _coordinate(payload: Mapping[str, Any], key: str) -> float:
    value = payload.get(key)
    # 0 is a real coordinate; only absent values are missing
    if value is None or value == "" or isinstance(value, bool):
        raise InvalidInput(INVALID_MARKER)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInput(INVALID_MARKER) from None
    if not math.isfinite(number):
        raise InvalidInput(INVALID_MARKER)
    return number


def validate_marker(payload: Any) -> NewMarker:
    """
    Check a marker submission.

    Requires ``lat``, ``lng`` and an ``emotion`` from the fixed set.
    A missing or empty ``comment`` becomes an empty string.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInput(INVALID_MARKER)

    lat = _coordinate(payload, "lat")
    lng = _coordinate(payload, "lng")

    emotion = payload.get("emotion")
    if not isinstance(emotion, str) or emotion not in EMOTIONS:
        raise InvalidInput(INVALID_MARKER)

    comment = payload.get("comment") or ""
    if not isinstance(comment, str):
        raise InvalidInput(INVALID_MARKER)

    return NewMarker(lat=lat, lng=lng, emotion=emotion, comment=comment)


def validate_contact(payload: Any) -> NewMessage:
    """
    Check a contact form submission.

    Order matters: presence first, then the email shape, then the message
    length (in characters, before trimming). Fields are trimmed last.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInput(MISSING_CONTACT_FIELDS)

    name = payload.get("name")
    email = payload.get("email")
    message = payload.get("message")
    for value in (name, email, message):
        if not isinstance(value, str) or not value:
            raise InvalidInput(MISSING_CONTACT_FIELDS)

    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidEmail(BAD_EMAIL)

    if len(message) > MAX_MESSAGE_LENGTH:
        raise MessageTooLong(TOO_LONG)

    return NewMessage(name=name.strip(), email=email.strip(), message=message.strip())
