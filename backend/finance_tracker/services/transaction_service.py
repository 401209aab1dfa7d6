"""
Finance Tracker Backend — Transaction Service (Resource Handler)
==================================================================

What:  The four transaction operations: list, create, update, delete.
Why:   One canonical implementation of the CRUD contract, parameterized only
       by the store it is given.
How:   Each operation performs exactly one store round-trip, shapes the
       result into a response schema, and maps failures onto the exception
       hierarchy (ValidationError → 400, NotFoundError → 404,
       DatabaseError → 500).
Who:   Called by the transaction routes; the store arrives through
       dependency injection (see dependencies.py).

Design Decision:
    TransactionService holds no state besides its store. Nothing is cached
    between requests and nothing is retried: a failed store call surfaces
    to the client, who may re-issue the request.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from finance_tracker.exceptions import DatabaseError, NotFoundError, ValidationError
from finance_tracker.schemas.transaction import (
    DeleteResponse,
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)
from finance_tracker.services.store_base import TransactionStore

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Request/response mapper over a TransactionStore.

    Error Handling Strategy:
        - Store constraint violations (IntegrityError) become ValidationError
        - A None from the store on update/delete becomes NotFoundError
        - Anything else becomes DatabaseError; create and update attach the
          failing error type as detail, list and delete stay generic
    """

    def __init__(self, store: TransactionStore):
        self.store = store

    async def list_transactions(self) -> List[TransactionResponse]:
        """
        Return all transactions, newest date first.

        Raises:
            DatabaseError: The store could not be queried (→ 500)
        """
        try:
            transactions = await self.store.find_all_sorted_by_date()
        except Exception as e:
            logger.error("Database error listing transactions: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve transactions. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [TransactionResponse.model_validate(tx) for tx in transactions]

    async def create_transaction(self, payload: TransactionCreate) -> TransactionResponse:
        """
        Persist a new transaction.

        The payload has already passed schema validation. An absent date is
        left out so the store assigns the creation time.

        Raises:
            ValidationError: The store rejected the record (→ 400)
            DatabaseError: Any other store failure (→ 500)
        """
        document = payload.model_dump(exclude_none=True)
        try:
            transaction = await self.store.insert(document)
        except IntegrityError as e:
            logger.warning("Store rejected new transaction: %s", str(e.orig))
            raise ValidationError(
                message="Transaction validation failed",
                detail=str(e.orig),
            )
        except Exception as e:
            logger.error("Database error creating transaction: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the transaction. Please try again.",
                detail=type(e).__name__,
            )

        logger.info("Transaction %s created (%s %s)", transaction.id, transaction.type, transaction.amount)
        return TransactionResponse.model_validate(transaction)

    async def update_transaction(
        self, transaction_id: str, payload: TransactionUpdate
    ) -> TransactionResponse:
        """
        Apply the submitted fields to an existing transaction.

        Fields missing from the payload are left untouched.

        Raises:
            NotFoundError: No transaction has this id (→ 404)
            ValidationError: The store rejected the new values (→ 400)
            DatabaseError: Any other store failure (→ 500)
        """
        changes = payload.changes()
        try:
            transaction = await self.store.find_by_id_and_update(transaction_id, changes)
        except IntegrityError as e:
            logger.warning("Store rejected update of %s: %s", transaction_id, str(e.orig))
            raise ValidationError(
                message="Transaction validation failed",
                detail=str(e.orig),
            )
        except Exception as e:
            logger.error(
                "Database error updating transaction %s: %s", transaction_id, str(e), exc_info=True
            )
            raise DatabaseError(
                message="Could not update the transaction. Please try again.",
                detail=type(e).__name__,
                context={"transaction_id": transaction_id},
            )

        if transaction is None:
            raise NotFoundError(resource="Transaction", resource_id=transaction_id)

        logger.info("Transaction %s updated (%s)", transaction_id, ", ".join(sorted(changes)) or "no changes")
        return TransactionResponse.model_validate(transaction)

    async def delete_transaction(self, transaction_id: str) -> DeleteResponse:
        """
        Permanently remove a transaction.

        Raises:
            NotFoundError: No transaction has this id (→ 404)
            DatabaseError: The store could not be reached (→ 500)
        """
        try:
            transaction = await self.store.find_by_id_and_delete(transaction_id)
        except Exception as e:
            logger.error(
                "Database error deleting transaction %s: %s", transaction_id, str(e), exc_info=True
            )
            raise DatabaseError(
                message="Could not delete the transaction. Please try again.",
                context={"transaction_id": transaction_id},
            )

        if transaction is None:
            raise NotFoundError(resource="Transaction", resource_id=transaction_id)

        logger.info("Transaction %s deleted", transaction_id)
        return DeleteResponse(
            message="Transaction deleted successfully",
            deleted_id=str(transaction.id),
        )
