"""
Document Builder

Turns one directory record into at most one ``SearchDocument``.

Title Resolution
----------------
1. Concatenate the values of the entries tagged as title.
2. No title entry at all: use the first indexed entry instead, and stop
   there (fallback A).
3. Title entries present but their values blank: retry with the first
   indexed entry (fallback B).
4. Still blank: the record is not indexed.

The title keeps field values as entered; only the content is reduced to
plain text.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from .classifier import EntrySets
from ..config import settings
from ..core.errors import MarkupError
from ..directory.models import Entry, Record
from ..directory.stores import FieldValueStore
from ..search.markup import strip_markup
from ..search.models import SearchDocument
from ..search.urls import (
    DIRECTORY,
    SHORT_NAME,
    build_record_url,
    resource_identifier_for,
)

logger = logging.getLogger("directory_search.builder")

ROLE_NONE = "none"


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class DocumentBuilder:
    """
    Builds search documents from records and their classified entries.

    Stateless apart from its collaborators; safe to reuse across records
    and directories.
    """

    def __init__(
        self,
        field_values: FieldValueStore,
        site_name: Optional[str] = None,
        prod_url: Optional[str] = None,
        portal_path: Optional[str] = None,
    ) -> None:
        self._field_values = field_values
        self.site_name = site_name if site_name is not None else settings.site_name
        self.prod_url = prod_url or settings.prod_url
        self.portal_path = portal_path or settings.portal_path

    async def concat(self, record: Record, entries: Sequence[Entry]) -> str:
        """
        Join the record's values for ``entries`` with single spaces.

        Values are ordered by entry order first, then by value order, and
        are not deduplicated.
        """
        if not entries:
            return ""

        entry_ids = [entry.id_entry for entry in entries]
        rank: Dict[int, int] = {}
        for i, id_entry in enumerate(entry_ids):
            rank.setdefault(id_entry, i)

        values = await self._field_values.list_field_values(entry_ids, record.id_record)
        values = sorted(values, key=lambda v: rank.get(v.id_entry, len(rank)))

        return " ".join(v.value or "" for v in values)

    async def build_from_sets(
        self,
        record: Record,
        entry_sets: EntrySets,
    ) -> Optional[SearchDocument]:
        return await self.build(
            record,
            title_entries=entry_sets.title,
            content_entries=entry_sets.content,
            summary_entries=entry_sets.summary,
        )

    async def build(
        self,
        record: Record,
        title_entries: Sequence[Entry],
        content_entries: Sequence[Entry],
        summary_entries: Sequence[Entry],
    ) -> Optional[SearchDocument]:
        """
        Build the search document of ``record``.

        Returns
        -------
        Optional[SearchDocument]
            None when no non-blank title can be derived.
        """
        title = await self._resolve_title(record, title_entries, content_entries)
        if is_blank(title):
            logger.debug("Record %d has no usable title, skipped", record.id_record)
            return None

        content = await self._resolve_content(record, content_entries)

        summary = None
        if summary_entries:
            text = await self.concat(record, summary_entries)
            if not is_blank(text):
                summary = text

        role = record.role_key if not is_blank(record.role_key) else ROLE_NONE

        return SearchDocument(
            title=title,
            content=content,
            summary=summary,
            role=role,
            date=record.date_creation,
            url=build_record_url(
                record.id_record,
                prod_url=self.prod_url,
                portal_path=self.portal_path,
            ),
            uid=resource_identifier_for(record.id_record, SHORT_NAME),
            type=DIRECTORY,
            site=self.site_name,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _resolve_title(
        self,
        record: Record,
        title_entries: Sequence[Entry],
        content_entries: Sequence[Entry],
    ) -> str:
        fallback = False

        if not title_entries and content_entries:
            title_entries = [content_entries[0]]
            fallback = True

        title = await self.concat(record, title_entries)

        if is_blank(title) and not fallback and content_entries:
            title = await self.concat(record, [content_entries[0]])

        return title

    async def _resolve_content(
        self,
        record: Record,
        content_entries: Sequence[Entry],
    ) -> Optional[str]:
        if not content_entries:
            return None

        raw = await self.concat(record, content_entries)
        if is_blank(raw):
            return None

        try:
            text = strip_markup(raw)
        except MarkupError:
            logger.warning(
                "Content of record %d dropped: markup could not be parsed",
                record.id_record,
            )
            return None

        return text if not is_blank(text) else None
