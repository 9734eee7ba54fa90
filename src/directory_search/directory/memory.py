"""
In-Memory Directory Repository

A single object implementing every directory store protocol over plain
lists. Used in tests and for running the indexer without a database.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .models import (
    Directory,
    DirectoryFilter,
    Entry,
    EntryFilter,
    FieldValue,
    Record,
    RecordFilter,
)


class InMemoryDirectoryRepository:
    """
    Directory, record, entry and field value store backed by lists.

    Entries are returned ordered by (position, id_entry); records and field
    values in id order, matching the SQL stores.
    """

    def __init__(
        self,
        directories: Sequence[Directory] = (),
        entries: Sequence[Entry] = (),
        records: Sequence[Record] = (),
        field_values: Sequence[FieldValue] = (),
    ) -> None:
        self._directories: Dict[int, Directory] = {
            d.id_directory: d for d in directories
        }
        self._entries: List[Entry] = list(entries)
        self._records: Dict[int, Record] = {r.id_record: r for r in records}
        self._field_values: List[FieldValue] = list(field_values)

    def add_directory(self, directory: Directory) -> None:
        self._directories[directory.id_directory] = directory

    def add_entry(self, entry: Entry) -> None:
        self._entries.append(entry)

    def add_record(self, record: Record) -> None:
        self._records[record.id_record] = record

    def add_field_value(self, field_value: FieldValue) -> None:
        self._field_values.append(field_value)

    # ------------------------------------------------------------------
    # DirectoryStore
    # ------------------------------------------------------------------

    async def list_directories(self, filter: DirectoryFilter) -> List[Directory]:
        return [
            d
            for _, d in sorted(self._directories.items())
            if (not filter.indexed_only or d.is_indexed)
            and (not filter.enabled_only or d.is_enabled)
        ]

    async def find_directory(self, id_directory: int) -> Optional[Directory]:
        return self._directories.get(id_directory)

    # ------------------------------------------------------------------
    # RecordStore
    # ------------------------------------------------------------------

    async def list_records(
        self,
        id_directory: int,
        filter: RecordFilter,
    ) -> List[Record]:
        return [
            r
            for _, r in sorted(self._records.items())
            if r.id_directory == id_directory
            and (not filter.enabled_only or r.is_enabled)
        ]

    async def find_record(self, id_record: int) -> Optional[Record]:
        return self._records.get(id_record)

    # ------------------------------------------------------------------
    # EntryStore
    # ------------------------------------------------------------------

    async def list_entries(self, filter: EntryFilter) -> List[Entry]:
        matching = [e for e in self._entries if filter.matches(e)]
        return sorted(matching, key=lambda e: (e.position, e.id_entry))

    # ------------------------------------------------------------------
    # FieldValueStore
    # ------------------------------------------------------------------

    async def list_field_values(
        self,
        entry_ids: Sequence[int],
        id_record: int,
    ) -> List[FieldValue]:
        wanted = set(entry_ids)
        matching = [
            v
            for v in self._field_values
            if v.id_record == id_record and v.id_entry in wanted
        ]
        return sorted(matching, key=lambda v: v.id_record_field)

    async def find_field_value(self, id_record_field: int) -> Optional[FieldValue]:
        for value in self._field_values:
            if value.id_record_field == id_record_field:
                return value
        return None
