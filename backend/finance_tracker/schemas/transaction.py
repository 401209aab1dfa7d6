"""
Finance Tracker Backend — Pydantic Request/Response Schemas
=============================================================

What:  Pydantic models defining the API contract for transactions.
Why:   Request bodies are validated here before any store round-trip, and
       responses are serialized from ORM objects through the same models.
How:   FastAPI validates request bodies against TransactionCreate /
       TransactionUpdate; failures become 400 responses (see main.py).

Validation rules (shared by create and update):
    - description, category: non-blank text, stored exactly as submitted
    - amount: finite number
    - type: 'income' or 'expense'
    - date: ISO 8601 timestamp; naive values are taken as UTC, offsets are
      converted to UTC
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from finance_tracker.models.transaction import TransactionType


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _require_text(value: Optional[str]) -> Optional[str]:
    """Reject whitespace-only text without altering what was sent."""
    if value is not None and not value.strip():
        raise ValueError("Field may not be blank")
    return value


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class TransactionCreate(BaseModel):
    """
    What:  Body of POST /api/transactions.
    Why:   Every required field must be present; `id` is never accepted from
           the client (unknown fields are ignored).

    Example:
        {"description": "Salary", "amount": 3000, "category": "Income", "type": "income"}
    """
    description: str = Field(min_length=1, description="What the money was for")
    amount: float = Field(allow_inf_nan=False, description="Transaction amount")
    category: str = Field(min_length=1, description="Category label")
    type: TransactionType = Field(description="'income' or 'expense'")
    date: Optional[datetime] = Field(
        default=None,
        description="When the transaction happened (defaults to creation time)",
    )

    model_config = {"use_enum_values": True}

    @field_validator("description", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)


class TransactionUpdate(BaseModel):
    """
    What:  Body of PUT /api/transactions/{id}.

    Partial updates are validated field by field: only submitted fields are
    checked, each with the same rules as TransactionCreate. Sending null for
    a field is rejected so required fields can never be cleared.
    """
    description: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    category: Optional[str] = Field(default=None, min_length=1)
    type: Optional[TransactionType] = None
    date: Optional[datetime] = None

    model_config = {"use_enum_values": True}

    @field_validator("description", "amount", "category", "type", "date", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        # Runs only for fields present in the body
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("description", "category")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _require_text(v)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)

    def changes(self) -> dict:
        """Fields the client actually submitted."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TransactionResponse(BaseModel):
    """
    What:  Full representation of a stored transaction, including generated fields.
    Who:   Returned by list, create and update.
    """
    id: uuid.UUID = Field(description="Identifier assigned by the store")
    description: str
    amount: float
    category: str
    type: TransactionType
    date: datetime = Field(description="Transaction timestamp (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo
        return _as_utc(v)


class DeleteResponse(BaseModel):
    """
    What:  Confirmation returned by DELETE /api/transactions/{id}.

    Example:
        {"message": "Transaction deleted successfully", "deletedId": "6f1c..."}
    """
    message: str = Field(default="Transaction deleted successfully")
    deleted_id: str = Field(alias="deletedId", description="Id of the removed transaction")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Fields:
        message: Human-readable description
        error:   Optional detail (validation summary or failing error type)
    """
    message: str = Field(description="Human-readable error description")
    error: Optional[str] = Field(default=None, description="Additional error detail")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
