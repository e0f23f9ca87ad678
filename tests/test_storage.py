"""Tests for the SQLAlchemy-backed store."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from emotionmap.errors import StorageError
from emotionmap.models import Marker
from emotionmap.storage import SQLAlchemyEmotionStore, estimate_users
from emotionmap.validation import NewMarker, NewMessage


@pytest.mark.parametrize(
    "total,expected",
    [(0, 100), (11, 100), (12, 101), (1200, 200), (58800, 5000), (10**6, 5000)],
)
def test_estimate_users(total, expected):
    assert estimate_users(total) == expected


@pytest.mark.asyncio
async def test_insert_marker_returns_increasing_ids(session):
    store = SQLAlchemyEmotionStore(session)
    first = await store.insert_marker(NewMarker(lat=1.0, lng=2.0, emotion="happy"))
    second = await store.insert_marker(NewMarker(lat=1.0, lng=2.0, emotion="happy"))
    assert second == first + 1

    markers = await store.list_markers()
    assert [m.id for m in markers] == [first, second]
    assert markers[0].comment == ""


@pytest.mark.asyncio
async def test_compute_stats(session):
    store = SQLAlchemyEmotionStore(session)
    for emotion in ["happy", "calm", "sad", "angry", "neutral", "calm"]:
        await store.insert_marker(NewMarker(lat=3.0, lng=4.0, emotion=emotion))

    stats = await store.compute_stats()
    assert stats.total == 6
    assert stats.positive == 3
    assert stats.users == 100
    assert stats.districts == 89


@pytest.mark.asyncio
async def test_list_messages_newest_first(session):
    store = SQLAlchemyEmotionStore(session)
    for name in ("A", "B", "C"):
        await store.insert_message(NewMessage(name=name, email="x@y.z", message="hello"))

    messages = await store.list_messages()
    assert [m.name for m in messages] == ["C", "B", "A"]
    assert all(m.created_at is not None for m in messages)


@pytest.mark.asyncio
async def test_read_failure_raises_storage_error():
    session = MagicMock()
    session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("no such table: markers")))
    store = SQLAlchemyEmotionStore(session)

    with pytest.raises(StorageError) as exc_info:
        await store.list_markers()
    assert exc_info.value.public_message == "Failed to read markers"
    assert isinstance(exc_info.value.__cause__, OperationalError)

    with pytest.raises(StorageError) as exc_info:
        await store.compute_stats()
    assert exc_info.value.public_message == "Database error"


@pytest.mark.asyncio
async def test_failed_insert_rolls_back(session):
    store = SQLAlchemyEmotionStore(session)
    original_commit = session.commit
    session.commit = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("database is locked")))

    with pytest.raises(StorageError) as exc_info:
        await store.insert_marker(NewMarker(lat=5.0, lng=6.0, emotion="sad"))
    assert exc_info.value.public_message == "Server error"

    session.commit = original_commit
    result = await session.execute(select(Marker))
    assert result.scalars().all() == []
