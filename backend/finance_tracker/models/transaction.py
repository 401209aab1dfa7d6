"""
Finance Tracker Backend — Transaction SQLAlchemy Model
========================================================

What:  ORM model representing the `transactions` table.
Why:   The table is the transaction store: it owns id generation, the default
       date and the not-null / type constraints on every write.
Who:   Used by SQLTransactionStore for CRUD operations and by Alembic.

Table Design:
    - UUID primary key: opaque, generated once on insert, never updated
    - description / category: required text
    - amount: required float
    - type: 'income' | 'expense', enforced by a CHECK constraint
    - date: UTC timestamp, defaults to insertion time (ORM and server side)

    Index on date DESC:
        Serves the only query pattern that scans the table: the full list,
        newest first.
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Float, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from finance_tracker.database import Base


class TransactionType(str, enum.Enum):
    """Whether a transaction adds money (income) or removes it (expense)."""

    INCOME = "income"
    EXPENSE = "expense"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Transaction(Base):
    """
    A single income or expense record.

    Lifecycle:
        1. Inserted by the create operation (id and default date assigned here)
        2. Updated in place by the update operation (any field except id)
        3. Hard-deleted by the delete operation
    """

    __tablename__ = "transactions"

    # Generated client-side so the id is known right after flush on every backend
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Opaque identifier assigned on creation",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="What the money was for",
    )

    amount: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Transaction amount",
    )

    category: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Free-form category label",
    )

    type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="income or expense",
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When the transaction happened (UTC); defaults to creation time",
    )

    __table_args__ = (
        CheckConstraint(
            "type IN ('income', 'expense')",
            name="ck_transactions_type",
        ),
        Index("idx_transactions_date", date.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, type='{self.type}', "
            f"amount={self.amount}, date='{self.date}')>"
        )
