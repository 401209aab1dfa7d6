"""
Finance Tracker Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the transaction API.
Why:   Each exception maps to exactly one HTTP status, so raw store errors
       never reach the client.
How:   Each exception carries a user-facing message, an optional detail string
       (returned to the client as "error") and a context dict (logged only).
       Global exception handlers registered in main.py turn them into
       JSON responses.

Exception Hierarchy:
    FinanceTrackerError (base)  → 500 Internal Server Error
    ├── ValidationError         → 400 Bad Request (client can fix)
    ├── NotFoundError           → 404 Not Found
    └── DatabaseError           → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class FinanceTrackerError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        detail:   Optional short explanation returned as the "error" field
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.detail = detail
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FinanceTrackerError):
    """
    Raised when a transaction payload fails validation.

    When:    Missing required field, `type` outside {income, expense},
             non-numeric amount, or a store constraint violation on write.
    HTTP:    400 Bad Request

    Example response:
        {
            "message": "Transaction validation failed",
            "error": "type: Input should be 'income' or 'expense'"
        }
    """

    def __init__(
        self,
        message: str = "Transaction validation failed",
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, detail=detail, context=context)


class NotFoundError(FinanceTrackerError):
    """
    Raised when a requested resource does not exist.

    When:    PUT or DELETE /api/transactions/{id} with an unknown id.
    HTTP:    404 Not Found

    The store returns None for missing records; TransactionService converts
    that None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(FinanceTrackerError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost, query failure, or any other unexpected store error.
    HTTP:    500 Internal Server Error

    The message is always generic. Create and update attach a short detail
    (the failing error type); list and delete do not.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, detail=detail, context=context)
