"""create_key_value_store_table

Revision ID: 5e3c1a7b9d20
Revises:
Create Date: 2026-10-19 09:30:12.418207

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "5e3c1a7b9d20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "key_value_store",
        sa.Column(
            "key",
            sa.String(length=255),
            nullable=False,
            comment="Storage key, e.g. 'carbon_history'",
        ),
        sa.Column(
            "value",
            sa.Text(),
            nullable=False,
            comment="Serialized value (JSON text)",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("key"),
        comment="String-keyed serialized blobs (e.g. calculation history)",
    )


def downgrade() -> None:
    op.drop_table("key_value_store")
