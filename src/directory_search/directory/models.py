"""
Directory Data Models

Read-side view of the directory plugin's data: directories, their entries
(field definitions), records (form submissions) and the field values a record
holds for each entry. Also defines the filters understood by the stores.

Instances are immutable; the indexer never writes back to the directory data.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


_FROZEN = ConfigDict(extra="forbid", frozen=True)


class Directory(BaseModel):
    """A form definition holding entries and records."""

    id_directory: int = Field(..., ge=0)
    title: str = ""
    is_enabled: bool = True
    is_indexed: bool = False

    model_config = _FROZEN


class Entry(BaseModel):
    """
    A field definition of a directory.

    The three indexing tags are independent: an entry may carry none, any,
    or all of them.
    """

    id_entry: int = Field(..., ge=0)
    id_directory: int = Field(..., ge=0)
    title: str = ""
    position: int = 0
    is_indexed: bool = False
    is_indexed_as_title: bool = False
    is_indexed_as_summary: bool = False

    model_config = _FROZEN


class Record(BaseModel):
    """One submission to a directory."""

    id_record: int = Field(..., ge=0)
    id_directory: int = Field(..., ge=0)
    is_enabled: bool = True
    role_key: Optional[str] = None
    date_creation: Optional[datetime] = None

    model_config = _FROZEN


class FieldValue(BaseModel):
    """The value of one entry for one record."""

    id_record_field: int = Field(..., ge=0)
    id_record: int = Field(..., ge=0)
    id_entry: int = Field(..., ge=0)
    value: Optional[str] = None

    model_config = _FROZEN


# ---------------------------------------------------------------------
# Store Filters
# ---------------------------------------------------------------------

class DirectoryFilter(BaseModel):
    indexed_only: bool = False
    enabled_only: bool = False

    model_config = _FROZEN


class RecordFilter(BaseModel):
    enabled_only: bool = False

    model_config = _FROZEN


class EntryFilter(BaseModel):
    """Filter on a directory's entries. Unset tags match every entry."""

    id_directory: int = Field(..., ge=0)
    indexed_only: bool = False
    title_only: bool = False
    summary_only: bool = False

    model_config = _FROZEN

    def matches(self, entry: Entry) -> bool:
        if entry.id_directory != self.id_directory:
            return False
        if self.indexed_only and not entry.is_indexed:
            return False
        if self.title_only and not entry.is_indexed_as_title:
            return False
        if self.summary_only and not entry.is_indexed_as_summary:
            return False
        return True
