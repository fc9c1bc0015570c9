"""Create entity tables

Revision ID: 001
Revises: None
Create Date: 2024-10-01 00:00:00.000000+00:00

What:  Creates one table per entity: ucsbdiningcommonsmenuitem,
       ucsborganization, ucsbrecommendationrequests, helprequests, articles.
How:   Integer keys are BIGINT identity columns; ucsborganization is keyed
       by its natural org_code. No foreign keys: the tables are independent.

Rollback: downgrade() drops all five tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _identity_key() -> sa.Column:
    return sa.Column(
        "id",
        sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
        primary_key=True,
        autoincrement=True,
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "ucsbdiningcommonsmenuitem",
        _identity_key(),
        sa.Column("dining_commons_code", sa.String(255), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("station", sa.String(255), nullable=True),
    )

    op.create_table(
        "ucsborganization",
        sa.Column("org_code", sa.String(255), primary_key=True, nullable=False),
        sa.Column("org_translation_short", sa.String(255), nullable=True),
        sa.Column("org_translation", sa.String(255), nullable=True),
        sa.Column("inactive", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "ucsbrecommendationrequests",
        _identity_key(),
        sa.Column("requester_email", sa.String(255), nullable=True),
        sa.Column("professor_email", sa.String(255), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("date_requested", sa.DateTime(), nullable=True),
        sa.Column("date_needed", sa.DateTime(), nullable=True),
        sa.Column("done", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "helprequests",
        _identity_key(),
        sa.Column("requester_email", sa.String(255), nullable=True),
        sa.Column("team_id", sa.String(255), nullable=True),
        sa.Column("table_or_breakout_room", sa.String(255), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("solved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("request_time", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "articles",
        _identity_key(),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("url", sa.String(2048), nullable=True),
        sa.Column("explanation", sa.Text(), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("date_added", sa.DateTime(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("articles")
    op.drop_table("helprequests")
    op.drop_table("ucsbrecommendationrequests")
    op.drop_table("ucsborganization")
    op.drop_table("ucsbdiningcommonsmenuitem")
