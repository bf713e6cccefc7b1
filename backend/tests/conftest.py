"""Root conftest - shared test configuration and the in-memory database.

Invariants:
    - Environment configured before any app module reads settings
    - Every test gets a fresh in-memory SQLite database with the invoices table

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for single-row statements
    - Real DatabaseSessionManager against SQLite: the scoped-connection and
      error-mapping code under test is the production code path
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import datetime  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import select  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.models.invoice import Invoice  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
def fetch_rows(db_manager):
    """Return all invoice rows as dicts, ordered by id."""
    async def _fetch() -> list[dict]:
        async with db_manager.connection() as conn:
            result = await conn.execute(
                select(Invoice.__table__).order_by(Invoice.id),
            )
            return [dict(row) for row in result.mappings().all()]
    return _fetch


@pytest.fixture
def seed_invoice(db_manager):
    """Insert an invoice row directly, bypassing the pipeline."""
    async def _seed(
        invoice_id: str = "inv-1",
        customer_id: str = "c1",
        amount: int = 1500,
        status: str = "pending",
        date: datetime.date = datetime.date(2023, 12, 6),
    ) -> str:
        async with db_manager.connection() as conn:
            await conn.execute(
                Invoice.__table__.insert().values(
                    id=invoice_id, customer_id=customer_id,
                    amount=amount, status=status, date=date,
                ),
            )
            await conn.commit()
        return invoice_id
    return _seed


@pytest.fixture
async def broken_table(db_manager):
    """Drop the invoices table so every statement fails at the driver."""
    async with db_manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
