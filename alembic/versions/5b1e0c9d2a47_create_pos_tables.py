"""create_pos_tables

Revision ID: 5b1e0c9d2a47
Revises:
Create Date: 2026-10-19 09:12:44.318207
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c9d2a47'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    # SALES
    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("applied_promos", sa.JSON(), nullable=False),
        sa.Column(
            "payment_method",
            sa.Enum("CASH", "QR", name="payment_method"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("request_id", sa.String(), nullable=True),
        sa.CheckConstraint("quantity > 0", name="ck_sale_quantity_positive"),
        sa.CheckConstraint("total_price >= 0", name="ck_sale_total_non_negative"),
        sa.UniqueConstraint("request_id"),
    )

    op.create_index("ix_sales_id", "sales", ["id"], unique=False)
    op.create_index("ix_sales_created_at", "sales", ["created_at"], unique=False)
    op.create_index("ix_sales_payment_method", "sales", ["payment_method"], unique=False)
    op.create_index(
        "ix_sales_payment_created",
        "sales",
        ["payment_method", "created_at"],
        unique=False,
    )

    # PROMO RULES
    op.create_table(
        "promo_rules",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("quantity >= 1", name="ck_promo_quantity_positive"),
        sa.CheckConstraint("price >= 0", name="ck_promo_price_non_negative"),
    )

    op.create_index("ix_promo_rules_id", "promo_rules", ["id"], unique=False)

    # APP SETTINGS
    op.create_table(
        "app_settings",
        sa.Column("key", sa.String(), primary_key=True),
        sa.Column("value", sa.String(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )

    # Default bundles
    promo_rules = sa.table(
        "promo_rules",
        sa.column("quantity", sa.Integer()),
        sa.column("price", sa.Numeric(10, 2)),
    )
    op.bulk_insert(
        promo_rules,
        [
            {"quantity": 2, "price": 5},
            {"quantity": 4, "price": 10},
        ],
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("app_settings")
    op.drop_index("ix_promo_rules_id", table_name="promo_rules")
    op.drop_table("promo_rules")
    op.drop_index("ix_sales_payment_created", table_name="sales")
    op.drop_index("ix_sales_payment_method", table_name="sales")
    op.drop_index("ix_sales_created_at", table_name="sales")
    op.drop_index("ix_sales_id", table_name="sales")
    op.drop_table("sales")
    sa.Enum(name="payment_method").drop(op.get_bind(), checkfirst=True)
