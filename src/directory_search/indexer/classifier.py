"""
Entry Classifier

Splits a directory's entries into the three roles they play in a search
document: content, title and summary.
"""

from __future__ import annotations

from typing import List, NamedTuple

from ..directory.models import Entry, EntryFilter
from ..directory.stores import EntryStore


class EntrySets(NamedTuple):
    content: List[Entry]
    title: List[Entry]
    summary: List[Entry]


async def classify_entries(entry_store: EntryStore, id_directory: int) -> EntrySets:
    """
    Return the directory's indexed, title and summary entries.

    The three tags are independent, so one entry may show up in several
    sets. Each set keeps the store's ordering.
    """
    content = await entry_store.list_entries(
        EntryFilter(id_directory=id_directory, indexed_only=True)
    )
    title = await entry_store.list_entries(
        EntryFilter(id_directory=id_directory, title_only=True)
    )
    summary = await entry_store.list_entries(
        EntryFilter(id_directory=id_directory, summary_only=True)
    )
    return EntrySets(content=content, title=title, summary=summary)
