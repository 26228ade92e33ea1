"""
SQLAlchemy ORM models for the movie tracker database.

The tracker persists named JSON documents (currently just the watched list)
in a single key-value table.
"""

from datetime import datetime
from sqlalchemy import String, Text, TIMESTAMP
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class KeyValueEntry(Base):
    """
    Key-value table storing JSON-encoded documents.

    Attributes:
        key: Primary key, the document name (e.g. 'watched')
        value: JSON-encoded document
        updated_at: Timestamp of the last write
    """
    __tablename__ = 'kv_entries'

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntry(key='{self.key}', size={len(self.value or '')})>"
