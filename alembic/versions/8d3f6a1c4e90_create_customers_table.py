"""create_customers_table

Revision ID: 8d3f6a1c4e90
Revises: 5b1e0c9d2a47
Create Date: 2026-10-19 15:40:02.917364
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d3f6a1c4e90'
down_revision: Union[str, Sequence[str], None] = '5b1e0c9d2a47'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("total_purchases", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("total_purchases >= 0", name="ck_customer_purchases_non_negative"),
    )
    op.create_index("ix_customers_id", "customers", ["id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_customers_id", table_name="customers")
    op.drop_table("customers")
