"""create user, product and cart tables

Revision ID: 3f9a1c2d7b10
Revises:
Create Date: 2026-10-17 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "product",
        sa.Column("object_id", sa.String(length=32), primary_key=True),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("author", sa.String(), nullable=False),
        sa.Column("genre", sa.String(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("available_inventory", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.CheckConstraint("available_inventory >= 0", name="ck_product_inventory_non_negative"),
    )
    op.create_index("ix_product_id", "product", ["id"], unique=True)

    op.create_table(
        "cartitem",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("user_id", sa.String(length=32), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("product.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_cartitem_user_id", "cartitem", ["user_id"])
    op.create_index("ix_cartitem_product_id", "cartitem", ["product_id"])


def downgrade() -> None:
    op.drop_index("ix_cartitem_product_id", table_name="cartitem")
    op.drop_index("ix_cartitem_user_id", table_name="cartitem")
    op.drop_table("cartitem")
    op.drop_index("ix_product_id", table_name="product")
    op.drop_table("product")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
