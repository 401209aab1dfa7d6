"""
Finance Tracker Backend — Dependency Providers
================================================

What:  FastAPI dependencies that compose the request-scoped object graph:
       AsyncSession → TransactionStore → TransactionService.
Why:   The service never reaches for a global store handle; tests swap the
       store (or the session) through app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.database import get_db_session
from finance_tracker.services.sql_store import SQLTransactionStore
from finance_tracker.services.store_base import TransactionStore
from finance_tracker.services.transaction_service import TransactionService


def get_transaction_store(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionStore:
    return SQLTransactionStore(db)


def get_transaction_service(
    store: TransactionStore = Depends(get_transaction_store),
) -> TransactionService:
    return TransactionService(store)
