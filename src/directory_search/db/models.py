"""
SQLAlchemy Models

Maps the directory plugin tables read by the indexer:
- Directories and their indexing flags
- Entries (field definitions) and their title/summary/content tags
- Records (form submissions)
- Record fields (one stored value of an entry for a record)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


# ---------------------------------------------------------------------
# Directory Model
# ---------------------------------------------------------------------

class DirectoryRow(Base):
    __tablename__ = "directory_directory"

    id_directory: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_indexed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


# ---------------------------------------------------------------------
# Entry Model
# ---------------------------------------------------------------------

class EntryRow(Base):
    """
    A field definition of a directory.

    The three ``is_indexed*`` flags are set independently by editors.
    """
    __tablename__ = "directory_entry"

    id_entry: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_directory: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("directory_directory.id_directory"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    entry_position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_indexed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_indexed_as_title: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_indexed_as_summary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_entry_directory", "id_directory", "entry_position"),
    )


# ---------------------------------------------------------------------
# Record Model
# ---------------------------------------------------------------------

class RecordRow(Base):
    __tablename__ = "directory_record"

    id_record: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_directory: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("directory_directory.id_directory"),
        nullable=False,
    )
    is_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    role_key: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    date_creation: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_record_directory", "id_directory"),
    )


# ---------------------------------------------------------------------
# Record Field Model
# ---------------------------------------------------------------------

class RecordFieldRow(Base):
    __tablename__ = "directory_record_field"

    id_record_field: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_record: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("directory_record.id_record", ondelete="CASCADE"),
        nullable=False,
    )
    id_entry: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("directory_entry.id_entry"),
        nullable=False,
    )
    record_field_value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_record_field_record_entry", "id_record", "id_entry"),
    )
