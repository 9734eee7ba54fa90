"""
Database Package

Provides SQLAlchemy async session management, the directory table models
and the SQL-backed directory stores.
"""

from .session import async_engine, AsyncSessionLocal
from .models import Base, DirectoryRow, EntryRow, RecordRow, RecordFieldRow
from .stores import (
    SqlDirectoryStore,
    SqlRecordStore,
    SqlEntryStore,
    SqlFieldValueStore,
)

__all__ = [
    "async_engine",
    "AsyncSessionLocal",
    "Base",
    "DirectoryRow",
    "EntryRow",
    "RecordRow",
    "RecordFieldRow",
    "SqlDirectoryStore",
    "SqlRecordStore",
    "SqlEntryStore",
    "SqlFieldValueStore",
]
