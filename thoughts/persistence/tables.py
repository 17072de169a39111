"""SQLAlchemy table definitions for the thought board.

Thoughts are stored key-value style: one row per live thought ID, with the
full nested thought (replies included) in a JSON document. These
definitions match the schema created by the Alembic migrations.
"""

from sqlalchemy import JSON, Column, Index, MetaData, Table, Uuid
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THOUGHTS TABLE
# ============================================================================
thoughts_table = Table(
    "thoughts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "document",
        JSON().with_variant(postgresql.JSONB(), "postgresql"),
        nullable=False,
    ),  # Whole thought, replies included
)

Index("idx_thoughts_created_at", thoughts_table.c.created_at)
