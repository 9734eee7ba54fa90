"""
Directory Store Interfaces

Narrow, read-only protocols through which the indexer reaches directory
data. The SQL implementations live in ``directory_search.db.stores`` and an
in-memory one in ``directory_search.directory.memory``.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from .models import (
    Directory,
    DirectoryFilter,
    Entry,
    EntryFilter,
    FieldValue,
    Record,
    RecordFilter,
)


class DirectoryStore(Protocol):
    async def list_directories(self, filter: DirectoryFilter) -> List[Directory]:
        ...

    async def find_directory(self, id_directory: int) -> Optional[Directory]:
        ...


class RecordStore(Protocol):
    async def list_records(
        self,
        id_directory: int,
        filter: RecordFilter,
    ) -> List[Record]:
        ...

    async def find_record(self, id_record: int) -> Optional[Record]:
        ...


class EntryStore(Protocol):
    async def list_entries(self, filter: EntryFilter) -> List[Entry]:
        """Entries matching ``filter`` in the store's natural order."""
        ...


class FieldValueStore(Protocol):
    async def list_field_values(
        self,
        entry_ids: Sequence[int],
        id_record: int,
    ) -> List[FieldValue]:
        """Values of ``id_record`` for the given entries, in value order."""
        ...

    async def find_field_value(self, id_record_field: int) -> Optional[FieldValue]:
        ...
