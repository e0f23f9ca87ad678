from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from emotionmap.config import Settings
from emotionmap.main import create_app
from emotionmap.models import Base

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture()
def test_db_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture()
def settings(test_db_url: str, tmp_path: Path) -> Settings:
    return Settings(
        debug=True,
        database_url=test_db_url,
        admin_token=ADMIN_TOKEN,
        client_dir=tmp_path / "no-client",
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest.fixture()
def admin_headers() -> dict:
    return {"X-Admin-Token": ADMIN_TOKEN}


@pytest_asyncio.fixture()
async def session(test_db_url: str) -> AsyncIterator[AsyncSession]:
    engine = create_async_engine(test_db_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as s:
        yield s
    await engine.dispose()
