"""
Finance Tracker Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Tests run against a real SQLite database (aiosqlite) created per test
       in a temporary directory, or against a mocked TransactionStore when a
       store failure has to be simulated.

Fixtures (function-scoped):
    ├── database_url: sqlite+aiosqlite URL inside tmp_path
    ├── db_engine: Async engine with the schema created
    ├── db_session: Session bound to db_engine
    ├── store: SQLTransactionStore over db_session
    ├── mock_store: AsyncMock implementing TransactionStore
    ├── app: Fresh FastAPI app whose sessions come from db_engine
    ├── test_client: HTTPX AsyncClient for the app
    └── salary_payload / groceries_payload: valid request bodies
"""

import os

# Must be set before finance_tracker.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from finance_tracker.database import Base, get_db_session
from finance_tracker.dependencies import get_transaction_store
from finance_tracker.main import create_app
from finance_tracker.models.transaction import Transaction  # noqa: F401
from finance_tracker.services.sql_store import SQLTransactionStore
from finance_tracker.services.store_base import TransactionStore


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'transactions.db'}"


@pytest_asyncio.fixture
async def db_engine(database_url):
    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(db_session) -> SQLTransactionStore:
    return SQLTransactionStore(db_session)


@pytest.fixture
def mock_store() -> AsyncMock:
    """
    A TransactionStore whose four operations are AsyncMocks.

    Usage:
        mock_store.find_all_sorted_by_date.side_effect = OperationalError(...)
    """
    return AsyncMock(spec=TransactionStore)


@pytest.fixture
def app(session_factory):
    """
    FastAPI app whose request sessions come from the per-test SQLite engine.

    The lifespan is not run by ASGITransport, so the production engine is
    never created here.
    """
    application = create_app()

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def mock_store_client(app, mock_store) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app whose store is replaced by mock_store."""
    app.dependency_overrides[get_transaction_store] = lambda: mock_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def salary_payload() -> dict:
    return {
        "description": "Salary",
        "amount": 3000,
        "category": "Income",
        "type": "income",
    }


@pytest.fixture
def groceries_payload() -> dict:
    return {
        "description": "Groceries",
        "amount": 50,
        "category": "Food",
        "type": "expense",
        "date": "2024-02-02T00:00:00Z",
    }
