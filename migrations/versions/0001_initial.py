"""create complexes, merchants, management_boards, latest_news, comments

Revision ID: 0001
Revises:
Create Date: 2024-06-01 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LIFECYCLE_CHECK = "is_active OR deactivated_date IS NOT NULL"


def _lifecycle_columns() -> list:
    return [
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("deactivated_date", sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "complexes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=100), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("web", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=2500), nullable=True),
        sa.Column("open_year", sa.Date(), nullable=False),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=True),
        *_lifecycle_columns(),
        sa.CheckConstraint(LIFECYCLE_CHECK, name="ck_complexes_lifecycle"),
    )
    op.create_index("ix_complexes_is_active", "complexes", ["is_active"])

    op.create_table(
        "merchants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=100), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("web", sa.String(length=255), nullable=True),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("description", sa.String(length=2500), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=True),
        *_lifecycle_columns(),
        sa.CheckConstraint(LIFECYCLE_CHECK, name="ck_merchants_lifecycle"),
    )
    op.create_index("ix_merchants_is_active", "merchants", ["is_active"])

    op.create_table(
        "management_boards",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("complexes_id", sa.Integer(), sa.ForeignKey("complexes.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("surname", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("is_man", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("device_id", sa.Uuid(), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=True),
    )
    # PostgreSQL 기본 비교는 대소문자를 구분하므로 일반 고유 인덱스로 충분합니다.
    op.create_index("ix_management_boards_username", "management_boards", ["username"], unique=True)

    op.create_table(
        "latest_news",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=100), nullable=True),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("news_time", sa.Date(), nullable=False),
        sa.Column("description", sa.String(length=2500), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=True),
        *_lifecycle_columns(),
        sa.CheckConstraint(LIFECYCLE_CHECK, name="ck_latest_news_lifecycle"),
    )
    op.create_index("ix_latest_news_is_active", "latest_news", ["is_active"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("phone_number", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=2500), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        *_lifecycle_columns(),
        sa.CheckConstraint(LIFECYCLE_CHECK, name="ck_comments_lifecycle"),
    )
    op.create_index("ix_comments_is_active", "comments", ["is_active"])


def downgrade() -> None:
    op.drop_index("ix_comments_is_active", table_name="comments")
    op.drop_table("comments")
    op.drop_index("ix_latest_news_is_active", table_name="latest_news")
    op.drop_table("latest_news")
    op.drop_index("ix_management_boards_username", table_name="management_boards")
    op.drop_table("management_boards")
    op.drop_index("ix_merchants_is_active", table_name="merchants")
    op.drop_table("merchants")
    op.drop_index("ix_complexes_is_active", table_name="complexes")
    op.drop_table("complexes")
