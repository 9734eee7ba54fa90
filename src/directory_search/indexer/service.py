"""
Directory Indexer

Batch and incremental entry points feeding directory records to a search
sink.

Behavior
--------
- ``index_all`` walks every enabled, indexed directory and its enabled
  records. A failing directory is logged and reported as one message; the
  pass always completes.
- ``documents_for_record`` rebuilds the document of a single record, e.g.
  after an edit. Malformed ids yield no documents.
- Both paths share ``_documents_for``, which classifies the directory's
  entries once and builds the record's document.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from .builder import DocumentBuilder
from .classifier import EntrySets, classify_entries
from ..config import settings
from ..core.errors import InvalidRecordIdError, format_directory_error
from ..directory.models import Directory, DirectoryFilter, Record, RecordFilter
from ..directory.stores import DirectoryStore, EntryStore, FieldValueStore, RecordStore
from ..search.models import SearchDocument
from ..search.sink import SearchSink
from ..search.urls import DIRECTORY, SHORT_NAME, resource_identifier_for

logger = logging.getLogger("directory_search.indexer")

# ASCII decimal digits with an optional leading minus, nothing else
_RECORD_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_record_id(record_id: Union[str, int]) -> int:
    if isinstance(record_id, int):
        return record_id

    if not isinstance(record_id, str) or not _RECORD_ID_PATTERN.fullmatch(record_id):
        raise InvalidRecordIdError(f"{record_id!r} not parseable to an int")

    return int(record_id)


def _log_document(document: SearchDocument) -> None:
    logger.info(
        "indexing %s id : %s Title : %s",
        document.type,
        document.uid,
        document.title,
    )


class DirectoryIndexer:
    """
    Search indexer for directory records.
    """

    def __init__(
        self,
        directories: DirectoryStore,
        records: RecordStore,
        entries: EntryStore,
        field_values: FieldValueStore,
        sink: SearchSink,
        builder: Optional[DocumentBuilder] = None,
    ) -> None:
        self._directories = directories
        self._records = records
        self._entries = entries
        self._sink = sink
        self._builder = builder or DocumentBuilder(field_values)

    @classmethod
    def from_session(cls, session: AsyncSession, sink: SearchSink) -> "DirectoryIndexer":
        """Wire the indexer to the SQL stores of one database session."""
        from ..db.stores import (
            SqlDirectoryStore,
            SqlEntryStore,
            SqlFieldValueStore,
            SqlRecordStore,
        )

        return cls(
            directories=SqlDirectoryStore(session),
            records=SqlRecordStore(session),
            entries=SqlEntryStore(session),
            field_values=SqlFieldValueStore(session),
            sink=sink,
        )

    # ------------------------------------------------------------------
    # Indexer metadata
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return settings.indexer_name

    @property
    def description(self) -> str:
        return settings.indexer_description

    @property
    def version(self) -> str:
        return settings.indexer_version

    @property
    def is_enabled(self) -> bool:
        return settings.indexer_enable

    def additional_fields(self) -> List[str]:
        """Extra search fields declared by this indexer. There are none."""
        return []

    @staticmethod
    def resource_identifier_for(resource_id: Union[int, str], resource_type: str = SHORT_NAME) -> str:
        return resource_identifier_for(resource_id, resource_type)

    # ------------------------------------------------------------------
    # Batch indexing
    # ------------------------------------------------------------------

    async def index_all(self) -> List[str]:
        """
        Index every enabled record of every enabled, indexed directory.

        Returns
        -------
        List[str]
            One message per directory that failed. Empty on full success.
        """
        errors: List[str] = []

        directories = await self._directories.list_directories(
            DirectoryFilter(indexed_only=True, enabled_only=True)
        )

        for directory in directories:
            try:
                count = await self._index_directory(directory)
                logger.info(
                    "Indexed %d document(s) from directory %d",
                    count,
                    directory.id_directory,
                )
            except Exception as exc:
                logger.exception(
                    "Failed to index directory %d",
                    directory.id_directory,
                )
                errors.append(format_directory_error(directory, exc))

        return errors

    async def _index_directory(self, directory: Directory) -> int:
        records = await self._records.list_records(
            directory.id_directory,
            RecordFilter(enabled_only=True),
        )

        if not records:
            return 0

        entry_sets = await classify_entries(self._entries, directory.id_directory)
        count = 0

        for record in records:
            try:
                documents = await self._documents_for(record, entry_sets)
            except Exception:
                logger.exception("Failed to build document for record %d", record.id_record)
                continue

            for document in documents:
                await self._sink.add(document)
                _log_document(document)
                count += 1

        return count

    # ------------------------------------------------------------------
    # Incremental indexing
    # ------------------------------------------------------------------

    async def documents_for_record(self, record_id: str) -> List[SearchDocument]:
        """
        Build the documents of one record.

        Returns an empty list when the id is malformed, the record is
        unknown, or the record, its directory, or the directory's indexing
        is disabled.
        """
        try:
            id_record = parse_record_id(record_id)
        except InvalidRecordIdError:
            logger.error("%r not parseable to an int", record_id)
            return []

        return await self._documents_for_id(id_record)

    async def _documents_for_id(self, id_record: int) -> List[SearchDocument]:
        record = await self._records.find_record(id_record)
        if record is None:
            logger.warning("Record %d not found", id_record)
            return []

        directory = await self._directories.find_directory(record.id_directory)

        if (
            directory is None
            or not record.is_enabled
            or not directory.is_enabled
            or not directory.is_indexed
        ):
            return []

        return await self._documents_for(record)

    async def index_record(self, record_id: str) -> int:
        """
        Push the current document of one record to the sink.

        A record that no longer yields a document is removed from the index.
        Returns the number of documents sent.
        """
        try:
            id_record = parse_record_id(record_id)
        except InvalidRecordIdError:
            logger.error("%r not parseable to an int", record_id)
            return 0

        documents = await self._documents_for_id(id_record)

        if not documents:
            await self.delete_record(id_record)
            return 0

        for document in documents:
            await self._sink.add(document)
            _log_document(document)

        return len(documents)

    async def delete_record(self, record_id: Union[str, int]) -> str:
        """
        Remove the document of one record from the index.

        Returns the uid that was deleted.

        Raises
        ------
        InvalidRecordIdError
            If ``record_id`` is not an integer.
        """
        uid = resource_identifier_for(parse_record_id(record_id), SHORT_NAME)
        await self._sink.delete(uid)
        logger.info("deleting %s id : %s", DIRECTORY, uid)
        return uid

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _documents_for(
        self,
        record: Record,
        entry_sets: Optional[EntrySets] = None,
    ) -> List[SearchDocument]:
        if entry_sets is None:
            entry_sets = await classify_entries(self._entries, record.id_directory)

        document = await self._builder.build_from_sets(record, entry_sets)
        return [document] if document is not None else []
