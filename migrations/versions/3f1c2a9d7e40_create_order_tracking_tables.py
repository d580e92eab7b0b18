"""create_order_tracking_tables

Revision ID: 3f1c2a9d7e40
Revises:
Create Date: 2026-10-18 09:12:41.503118

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

DISTRIBUTION_STATUSES = (
    "Pending",
    "Shipped",
    "In Transit",
    "Out for Delivery",
    "Delivered",
)


def upgrade() -> None:
    """Create credentials, drug_imports and distribution_orders tables."""
    op.create_table(
        "credentials",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(150), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
    )
    op.create_index("ix_credentials_username", "credentials", ["username"], unique=True)

    op.create_table(
        "drug_imports",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("order_no", sa.String(50), nullable=False),
        sa.Column("drug_name", sa.String(255), nullable=False),
        sa.Column("supplier", sa.String(255), nullable=False),
        sa.Column("date", sa.String(20), nullable=False),
        sa.Column("po_number", sa.String(50), nullable=False),
        sa.Column("payment_method", sa.String(50), nullable=False),
        sa.Column("documents", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
    )
    op.create_index("ix_drug_imports_order_no", "drug_imports", ["order_no"])

    op.create_table(
        "distribution_orders",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("order_number", sa.String(100), nullable=False),
        sa.Column("tracking_number", sa.String(100), nullable=False),
        sa.Column("customer_name", sa.String(255), nullable=False),
        sa.Column("shipping_address", sa.Text(), nullable=False),
        sa.Column("contact_phone", sa.String(50), nullable=False),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column(
            "status",
            sa.Enum(*DISTRIBUTION_STATUSES, name="distribution_status"),
            nullable=False,
            server_default="Pending",
        ),
        sa.Column(
            "order_date",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("product_info", sa.JSON(), nullable=True),
        sa.Column("analysis", sa.JSON(), nullable=True),
        sa.Column("delivery_timeline", sa.JSON(), nullable=False),
        sa.Column("documents", sa.JSON(), nullable=False),
        sa.Column("location", sa.JSON(), nullable=False),
        sa.Column("signature", sa.Text(), nullable=True),
    )
    op.create_index(
        "ix_distribution_orders_order_number",
        "distribution_orders",
        ["order_number"],
        unique=True,
    )


def downgrade() -> None:
    """Drop the order tracking tables."""
    op.drop_index("ix_distribution_orders_order_number", table_name="distribution_orders")
    op.drop_table("distribution_orders")
    sa.Enum(name="distribution_status").drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_drug_imports_order_no", table_name="drug_imports")
    op.drop_table("drug_imports")
    op.drop_index("ix_credentials_username", table_name="credentials")
    op.drop_table("credentials")
