"""Infrastructure fixtures — a DatabaseSessionManager on in-memory SQLite."""

import pytest

from planet_api.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.dispose()
