"""
Finance Tracker Backend — Abstract Transaction Store Interface
================================================================

What:  Abstract base class defining the contract between the transaction
       handler and the database that holds transaction records.
Why:   TransactionService only ever talks to this interface, so the concrete
       store is chosen at composition time (dependency injection) and can be
       replaced in tests.
How:   Concrete implementations inherit from TransactionStore and implement
       the four operations below.

Contract:
    - The store assigns `id` and, when absent, `date` on insert
    - The store enforces its own column constraints and raises on violation
    - "Not found" is reported by returning None, never by raising
    - Ids the store cannot interpret are treated as not found
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from finance_tracker.models.transaction import Transaction


class TransactionStore(ABC):
    """
    Abstract interface over the transaction collection.

    Implementations:
        - SQLTransactionStore: async SQLAlchemy over the `transactions` table
    """

    @abstractmethod
    async def find_all_sorted_by_date(self) -> List[Transaction]:
        """
        Return every transaction, newest `date` first.

        Ordering between records with the same date is unspecified.
        """
        ...

    @abstractmethod
    async def insert(self, document: Dict[str, Any]) -> Transaction:
        """
        Persist a new transaction.

        Args:
            document: Validated field values (no id; date may be absent).

        Returns:
            The stored record, including generated fields.
        """
        ...

    @abstractmethod
    async def find_by_id_and_update(
        self, transaction_id: str, changes: Dict[str, Any]
    ) -> Optional[Transaction]:
        """
        Apply `changes` to the record with the given id.

        Returns:
            The updated record, or None when no record has that id.
        """
        ...

    @abstractmethod
    async def find_by_id_and_delete(self, transaction_id: str) -> Optional[Transaction]:
        """
        Remove the record with the given id.

        Returns:
            The removed record, or None when no record has that id.
        """
        ...
