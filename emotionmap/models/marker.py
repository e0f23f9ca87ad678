"""Marker model: one geo-tagged emotion observation."""

import enum

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from emotionmap.models.base import Base


class Emotion(str, enum.Enum):
    """Permitted marker labels."""
    HAPPY = "happy"
    CALM = "calm"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANGRY = "angry"


POSITIVE_EMOTIONS = (Emotion.HAPPY.value, Emotion.CALM.value)


class Marker(Base):
    """Emotion marker placed on the map."""

    __tablename__ = "markers"
    # Ids are never reused, even after the highest row disappears
    __table_args__ = {"sqlite_autoincrement": True}

    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)
    # Stored as plain text; membership in Emotion is checked by the application
    emotion: Mapped[str] = mapped_column(String(16), nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Marker {self.id} {self.emotion} ({self.lat}, {self.lng})>"
