"""create users, stacks and email_verifications tables

Revision ID: core_20261019
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "core_20261019"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    # owner carries no foreign key; stacks remain after their user is deleted.
    op.create_table(
        "stacks",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("owner", sa.String(length=26), nullable=False),
        sa.Column("items", sa.JSON(), nullable=False),
    )
    op.create_index("ix_stacks_owner", "stacks", ["owner"])

    op.create_table(
        "email_verifications",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("expiration", sa.BigInteger(), nullable=False),
        sa.Column("cooldown", sa.BigInteger(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("email_verifications")
    op.drop_index("ix_stacks_owner", table_name="stacks")
    op.drop_table("stacks")
    op.drop_table("users")
