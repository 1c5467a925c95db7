"""Initial schema - document table keyed by collection.

Revision ID: 001
Revises:
Create Date: 2024-01-08

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("collection", sa.String(100), nullable=False),
        sa.Column("data", postgresql.JSONB(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_document_collection", "document", ["collection"])
    # Event listings filter on the date field.
    op.execute(
        "CREATE INDEX ix_document_events_date ON document ((data->>'date')) "
        "WHERE collection = 'events'"
    )


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS ix_document_events_date")
    op.drop_index("ix_document_collection", table_name="document")
    op.drop_table("document")
