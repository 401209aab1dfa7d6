"""Create transactions table

Revision ID: 001
Revises: None
Create Date: 2024-02-01 00:00:00.000000+00:00

What:  Creates the `transactions` table holding income and expense records.
How:   Portable column types (Uuid, DateTime with timezone) so the same
       migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table (all transactions are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the transactions table, its type constraint and date index."""
    op.create_table(
        "transactions",
        sa.Column(
            "id",
            sa.Uuid(),
            nullable=False,
            comment="Opaque identifier assigned on creation",
        ),
        sa.Column(
            "description",
            sa.Text(),
            nullable=False,
            comment="What the money was for",
        ),
        sa.Column(
            "amount",
            sa.Float(),
            nullable=False,
            comment="Transaction amount",
        ),
        sa.Column(
            "category",
            sa.Text(),
            nullable=False,
            comment="Free-form category label",
        ),
        sa.Column(
            "type",
            sa.String(16),
            nullable=False,
            comment="income or expense",
        ),
        sa.Column(
            "date",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When the transaction happened (UTC); defaults to creation time",
        ),
        sa.CheckConstraint(
            "type IN ('income', 'expense')",
            name="ck_transactions_type",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Listing is always ORDER BY date DESC
    op.create_index(
        "idx_transactions_date",
        "transactions",
        [sa.text("date DESC")],
    )


def downgrade() -> None:
    """Drop the transactions table entirely (destructive)."""
    op.drop_index("idx_transactions_date", table_name="transactions")
    op.drop_table("transactions")
