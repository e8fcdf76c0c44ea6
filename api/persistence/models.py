"""
SQLAlchemy models for the pet battle.

This module contains the SQLAlchemy ORM models that correspond to the database schema
defined in the Alembic migrations. These models mirror the Pydantic models for API
serialization but are used for database operations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    Text,
    TIMESTAMP,
    text,
    Index,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CatRecord(Base):
    """
    SQLAlchemy model for the cats table.

    One row per submitted cat, including cats flagged as not safe for work,
    which are kept for moderation.
    """

    __tablename__ = "cats"

    id = Column(Text, primary_key=True)
    image = Column(Text, nullable=False)
    count = Column(Integer, nullable=False, server_default="0")
    issfw = Column(Boolean, nullable=True)
    vote = Column(Boolean, nullable=False, server_default=text("false"))
    created_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))
    updated_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))

    def __repr__(self):
        return f"<CatRecord(id='{self.id}', count={self.count}, issfw={self.issfw})>"


# Index definitions to match the migration files
Index("idx_cats_count", CatRecord.count)
Index("idx_cats_issfw", CatRecord.issfw)
