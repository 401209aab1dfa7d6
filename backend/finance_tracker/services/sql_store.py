"""
Finance Tracker Backend — SQLAlchemy Transaction Store
========================================================

What:  TransactionStore implementation backed by the `transactions` table.
Why:   Keeps every SQL detail out of TransactionService.
How:   Wraps one AsyncSession (one per request). Each write is committed on
       its own, so every create/update/delete is atomic for a single record
       and nothing spans multiple records.

Query plans:
    List:    SELECT ... ORDER BY date DESC  → idx_transactions_date
    By id:   primary key lookup (session.get)
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.transaction import Transaction
from finance_tracker.services.store_base import TransactionStore

logger = logging.getLogger(__name__)


def _parse_id(transaction_id: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(transaction_id))
    except ValueError:
        return None


class SQLTransactionStore(TransactionStore):
    """Transaction store over an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all_sorted_by_date(self) -> List[Transaction]:
        result = await self.session.execute(
            select(Transaction).order_by(Transaction.date.desc())
        )
        return list(result.scalars().all())

    async def insert(self, document: Dict[str, Any]) -> Transaction:
        transaction = Transaction(**document)
        self.session.add(transaction)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug("Inserted transaction %s", transaction.id)
        return transaction

    async def _get(self, transaction_id: str) -> Optional[Transaction]:
        key = _parse_id(transaction_id)
        if key is None:
            return None
        return await self.session.get(Transaction, key)

    async def find_by_id_and_update(
        self, transaction_id: str, changes: Dict[str, Any]
    ) -> Optional[Transaction]:
        transaction = await self._get(transaction_id)
        if transaction is None:
            return None

        for field, value in changes.items():
            if field == "id":
                continue  # immutable
            setattr(transaction, field, value)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug("Updated transaction %s: %s", transaction.id, sorted(changes))
        return transaction

    async def find_by_id_and_delete(self, transaction_id: str) -> Optional[Transaction]:
        transaction = await self._get(transaction_id)
        if transaction is None:
            return None

        await self.session.delete(transaction)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug("Deleted transaction %s", transaction.id)
        return transaction
