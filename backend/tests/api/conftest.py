"""API test fixtures - FastAPI test client bound to the in-memory database.

Invariants:
    - get_db_manager dependency overridden to use the test manager
    - Module-level db_manager patched for the readiness probe
    - View cache emptied before and after every test
"""

import datetime

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.infrastructure.database import get_db_manager
from app.infrastructure.view_cache import view_cache
from app.main import app


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with DB dependency overridden."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    original_manager = db_module.db_manager
    db_module.db_manager = db_manager
    view_cache.clear()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    view_cache.clear()


@pytest.fixture
def today():
    return datetime.date.today()
