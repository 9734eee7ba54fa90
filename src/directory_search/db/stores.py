"""
SQL Directory Stores

SQLAlchemy implementations of the directory store protocols. Each store
wraps an ``AsyncSession`` and converts rows into the immutable domain models
before returning them.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import DirectoryRow, EntryRow, RecordFieldRow, RecordRow
from ..directory.models import (
    Directory,
    DirectoryFilter,
    Entry,
    EntryFilter,
    FieldValue,
    Record,
    RecordFilter,
)


# ---------------------------------------------------------------------
# Row Conversion
# ---------------------------------------------------------------------

def _to_directory(row: DirectoryRow) -> Directory:
    return Directory(
        id_directory=row.id_directory,
        title=row.title or "",
        is_enabled=bool(row.is_enabled),
        is_indexed=bool(row.is_indexed),
    )


def _to_entry(row: EntryRow) -> Entry:
    return Entry(
        id_entry=row.id_entry,
        id_directory=row.id_directory,
        title=row.title or "",
        position=row.entry_position or 0,
        is_indexed=bool(row.is_indexed),
        is_indexed_as_title=bool(row.is_indexed_as_title),
        is_indexed_as_summary=bool(row.is_indexed_as_summary),
    )


def _to_record(row: RecordRow) -> Record:
    return Record(
        id_record=row.id_record,
        id_directory=row.id_directory,
        is_enabled=bool(row.is_enabled),
        role_key=row.role_key,
        date_creation=row.date_creation,
    )


def _to_field_value(row: RecordFieldRow) -> FieldValue:
    return FieldValue(
        id_record_field=row.id_record_field,
        id_record=row.id_record,
        id_entry=row.id_entry,
        value=row.record_field_value,
    )


# ---------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------

class SqlDirectoryStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_directories(self, filter: DirectoryFilter) -> List[Directory]:
        stmt = select(DirectoryRow).order_by(DirectoryRow.id_directory)

        if filter.indexed_only:
            stmt = stmt.where(DirectoryRow.is_indexed.is_(True))

        if filter.enabled_only:
            stmt = stmt.where(DirectoryRow.is_enabled.is_(True))

        result = await self._session.execute(stmt)
        return [_to_directory(row) for row in result.scalars().all()]

    async def find_directory(self, id_directory: int) -> Optional[Directory]:
        row = await self._session.get(DirectoryRow, id_directory)
        return _to_directory(row) if row is not None else None


class SqlRecordStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_records(
        self,
        id_directory: int,
        filter: RecordFilter,
    ) -> List[Record]:
        stmt = (
            select(RecordRow)
            .where(RecordRow.id_directory == id_directory)
            .order_by(RecordRow.id_record)
        )

        if filter.enabled_only:
            stmt = stmt.where(RecordRow.is_enabled.is_(True))

        result = await self._session.execute(stmt)
        return [_to_record(row) for row in result.scalars().all()]

    async def find_record(self, id_record: int) -> Optional[Record]:
        row = await self._session.get(RecordRow, id_record)
        return _to_record(row) if row is not None else None


class SqlEntryStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_entries(self, filter: EntryFilter) -> List[Entry]:
        """
        Return the directory's entries matching the filter.

        Ordered by entry position, then id, which is the order entries are
        shown on the directory's form.
        """
        stmt = (
            select(EntryRow)
            .where(EntryRow.id_directory == filter.id_directory)
            .order_by(EntryRow.entry_position, EntryRow.id_entry)
        )

        if filter.indexed_only:
            stmt = stmt.where(EntryRow.is_indexed.is_(True))

        if filter.title_only:
            stmt = stmt.where(EntryRow.is_indexed_as_title.is_(True))

        if filter.summary_only:
            stmt = stmt.where(EntryRow.is_indexed_as_summary.is_(True))

        result = await self._session.execute(stmt)
        return [_to_entry(row) for row in result.scalars().all()]


class SqlFieldValueStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_field_values(
        self,
        entry_ids: Sequence[int],
        id_record: int,
    ) -> List[FieldValue]:
        if not entry_ids:
            return []

        stmt = (
            select(RecordFieldRow)
            .where(
                RecordFieldRow.id_record == id_record,
                RecordFieldRow.id_entry.in_(list(entry_ids)),
            )
            .order_by(RecordFieldRow.id_record_field)
        )

        result = await self._session.execute(stmt)
        return [_to_field_value(row) for row in result.scalars().all()]

    async def find_field_value(self, id_record_field: int) -> Optional[FieldValue]:
        row = await self._session.get(RecordFieldRow, id_record_field)
        return _to_field_value(row) if row is not None else None
