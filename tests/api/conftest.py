"""API test fixtures — isolated app per test on in-memory SQLite + tmp upload dir.

Invariants:
    - Every test gets a fresh in-memory SQLite database with tables created
    - Every test gets its own empty upload directory
    - alice and bob exist as users; ALICE/BOB are their Basic auth tuples

Design Decisions:
    - create_app(settings) instead of the module-level app: no shared state between tests
    - httpx ASGITransport does not run the lifespan, so tables are created here
"""

import pytest
from httpx import ASGITransport, AsyncClient

from planet_api.config import Settings
from planet_api.main import create_app
from tests.api.helpers import ALICE, BOB


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir):
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        upload_dir=str(upload_dir),
        photo_max_bytes=1024,
        log_format="text",
    )


@pytest.fixture
async def app(settings):
    application = create_app(settings)
    await application.state.db_manager.create_tables()
    await application.state.user_directory.add_user(*ALICE)
    await application.state.user_directory.add_user(*BOB)
    yield application
    await application.state.db_manager.dispose()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_planet(client):
    """POST a planet as alice and return the response JSON."""
    async def _create(**body):
        payload = {"name": "Earth", **body}
        res = await client.post("/planets", json=payload, auth=ALICE)
        assert res.status_code == 201, res.text
        return res.json()
    return _create
