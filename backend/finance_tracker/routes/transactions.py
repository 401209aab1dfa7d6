"""
Finance Tracker Backend — Transaction Route Handlers
======================================================

What:  The four CRUD endpoints under /api/transactions.
How:   Each handler receives a TransactionService through dependency
       injection and returns its result; status codes for failures come from
       the global exception handlers in main.py.

Status codes:
    GET    /api/transactions        200
    POST   /api/transactions        201  (400 on invalid payload)
    PUT    /api/transactions/{id}   200  (400 invalid, 404 unknown id)
    DELETE /api/transactions/{id}   200  (404 unknown id)
    Any store failure               500
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from finance_tracker.dependencies import get_transaction_service
from finance_tracker.schemas.transaction import (
    DeleteResponse,
    ErrorResponse,
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)
from finance_tracker.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


@router.get(
    "",
    response_model=List[TransactionResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all transactions, newest first",
)
async def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
) -> List[TransactionResponse]:
    return await service.list_transactions()


@router.post(
    "",
    status_code=201,
    response_model=TransactionResponse,
    responses={
        400: {"description": "Invalid transaction payload", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Record a new transaction",
    description=(
        "Creates an income or expense entry. `date` is optional and defaults to "
        "the time of creation. The response includes the generated `id`."
    ),
)
async def create_transaction(
    payload: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    return await service.create_transaction(payload)


@router.put(
    "/{transaction_id}",
    response_model=TransactionResponse,
    responses={
        400: {"description": "Invalid field values", "model": ErrorResponse},
        404: {"description": "Transaction not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update fields of a transaction",
    description="Only the submitted fields are changed; the others keep their values.",
)
async def update_transaction(
    transaction_id: str,
    payload: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    return await service.update_transaction(transaction_id, payload)


@router.delete(
    "/{transaction_id}",
    response_model=DeleteResponse,
    responses={
        404: {"description": "Transaction not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a transaction permanently",
)
async def delete_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
) -> DeleteResponse:
    return await service.delete_transaction(transaction_id)
