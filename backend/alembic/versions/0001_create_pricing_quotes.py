"""Create pricing_quotes table.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa


def upgrade() -> None:
    op.create_table(
        "pricing_quotes",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("team_size", sa.Integer()),
        sa.Column("role_type", sa.String(20)),
        sa.Column("roles", sa.Text()),
        sa.Column("experience", sa.String(20)),
        sa.Column("industry", sa.String(255)),
        sa.Column("workplace", sa.String(50)),
        sa.Column("description", sa.Text()),
        sa.Column("form_data", sa.JSON()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_pricing_quotes_user_id", "pricing_quotes", ["user_id"])
    op.create_index("ix_pricing_quotes_created_at", "pricing_quotes", ["created_at"])


def downgrade() -> None:
    op.drop_table("pricing_quotes")
