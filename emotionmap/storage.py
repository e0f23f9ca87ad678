"""Persistence and aggregation for markers and contact messages."""

import abc
import logging
from typing import List

from pydantic import BaseModel
from sqlalchemy import case, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from emotionmap.errors import StorageError
from emotionmap.models import Marker, Message, POSITIVE_EMOTIONS
from emotionmap.utils.logging import debug_log
from emotionmap.validation import NewMarker, NewMessage

logger = logging.getLogger("EmotionMap.storage")

USERS_CAP = 5000
USERS_BASE = 100
MARKERS_PER_USER = 12
# Placeholder shown on the landing page; not computed
DISTRICTS = 89


class Stats(BaseModel):
    """Aggregate marker statistics."""
    total: int
    positive: int
    users: int
    districts: int


def estimate_users(total: int) -> int:
    """Engagement figure derived from the marker count alone."""
    return min(USERS_CAP, total // MARKERS_PER_USER + USERS_BASE)


class EmotionStore(abc.ABC):
    """Storage interface used by the request handlers."""

    @abc.abstractmethod
    async def insert_marker(self, marker: NewMarker) -> int:
        """Append a marker and return its id."""

    @abc.abstractmethod
    async def list_markers(self) -> List[Marker]:
        """Return every marker."""

    @abc.abstractmethod
    async def compute_stats(self) -> Stats:
        """Return total/positive counts and the derived figures."""

    @abc.abstractmethod
    async def insert_message(self, message: NewMessage) -> None:
        """Append a contact message."""

    @abc.abstractmethod
    async def list_messages(self) -> List[Message]:
        """Return all contact messages, newest first."""


class SQLAlchemyEmotionStore(EmotionStore):
    """EmotionStore over an async SQLAlchemy session.

    Works with any async dialect; SQLite (aiosqlite) and PostgreSQL
    (asyncpg) are the two deployed backends.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback failed: {e}")

    async def insert_marker(self, marker: NewMarker) -> int:
        row = Marker(
            lat=marker.lat,
            lng=marker.lng,
            emotion=marker.emotion,
            comment=marker.comment,
        )
        try:
            self.session.add(row)
            await self.session.flush()
            marker_id = row.id
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Failed to insert marker: {e}", "Server error") from e

        debug_log("Inserted marker %s (%s)", marker_id, marker.emotion)
        return marker_id

    async def list_markers(self) -> List[Marker]:
        try:
            result = await self.session.execute(select(Marker).order_by(Marker.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list markers: {e}", "Failed to read markers") from e

    async def compute_stats(self) -> Stats:
        # One statement so both counts come from the same snapshot
        stmt = select(
            func.count(Marker.id),
            func.count(case((Marker.emotion.in_(POSITIVE_EMOTIONS), 1))),
        )
        try:
            result = await self.session.execute(stmt)
            total, positive = result.one()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to compute stats: {e}", "Database error") from e

        total = total or 0
        positive = positive or 0
        return Stats(
            total=total,
            positive=positive,
            users=estimate_users(total),
            districts=DISTRICTS,
        )

    async def insert_message(self, message: NewMessage) -> None:
        row = Message(name=message.name, email=message.email, message=message.message)
        try:
            self.session.add(row)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Failed to insert message: {e}", "Failed to send message") from e

        debug_log("Inserted contact message from %s", message.email)

    async def list_messages(self) -> List[Message]:
        # Same-second inserts share created_at; id keeps them newest first
        stmt = select(Message).order_by(desc(Message.created_at), desc(Message.id))
        try:
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list messages: {e}", "Error") from e


async def provide_store(session: AsyncSession) -> EmotionStore:
    """Litestar dependency: wrap the request session in a store."""
    return SQLAlchemyEmotionStore(session)
