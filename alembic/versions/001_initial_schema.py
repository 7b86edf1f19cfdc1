"""Initial schema — auth (identities) and posts.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "auth",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(64), nullable=False, unique=True),
        sa.Column("salt", sa.String(128), nullable=True),
        sa.Column("pass_hash", sa.String(256), nullable=True),
        sa.Column("token", sa.String(128), nullable=True),
        sa.CheckConstraint(
            "(salt IS NULL AND pass_hash IS NULL AND token IS NULL) OR "
            "(salt IS NOT NULL AND pass_hash IS NOT NULL AND token IS NOT NULL)",
            name="ck_auth_credentials_atomic",
        ),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("publish_date", sa.BigInteger, nullable=False),
        sa.Column("create_date", sa.BigInteger, nullable=False),
    )
    op.create_index("ix_posts_publish_date", "posts", ["publish_date"])


def downgrade() -> None:
    op.drop_index("ix_posts_publish_date", table_name="posts")
    op.drop_table("posts")
    op.drop_table("auth")
