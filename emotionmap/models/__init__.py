"""EmotionMap database models."""

from emotionmap.models.base import Base
from emotionmap.models.marker import Marker, Emotion, POSITIVE_EMOTIONS
from emotionmap.models.message import Message

__all__ = [
    "Base",
    "Marker",
    "Emotion",
    "POSITIVE_EMOTIONS",
    "Message",
]
