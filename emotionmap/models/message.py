"""Message model for contact form submissions."""

from datetime import datetime

from sqlalchemy import DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from emotionmap.models.base import Base


class Message(Base):
    """Visitor contact message."""

    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Message {self.email} ({self.created_at})>"
