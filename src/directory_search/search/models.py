"""
Search Document Model

This module defines the flat document handed to the search engine for one
directory record.

Each instance corresponds to ONE record and ONE entry in the search index,
keyed by ``uid`` so the index can be maintained incrementally.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ConfigDict


class SearchDocument(BaseModel):
    """
    A search-engine-ready view of a directory record.
    """

    title: str = Field(
        ...,
        min_length=1,
        description="Concatenated title field values (markup kept as entered).",
    )

    content: Optional[str] = Field(
        default=None,
        description="Plain text of the indexed field values.",
    )

    summary: Optional[str] = Field(
        default=None,
        description="Concatenated summary field values, verbatim.",
    )

    role: str = Field(
        ...,
        min_length=1,
        description="Role key required to see the record, or 'none'.",
    )

    date: Optional[datetime] = Field(
        default=None,
        description="Creation date of the record.",
    )

    url: str = Field(
        ...,
        min_length=1,
        description="Front office URL displaying the record.",
    )

    uid: str = Field(
        ...,
        min_length=1,
        description="Unique identifier, stable across indexing runs.",
    )

    type: str = Field(..., min_length=1)
    site: str = ""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def to_solr(self) -> Dict[str, Any]:
        """
        Serialize for a Solr JSON update request.

        Unset optional fields are omitted and the date is rendered in the
        UTC ``Z`` form Solr requires.
        """
        doc = self.model_dump(exclude_none=True)

        if self.date is not None:
            date = self.date
            if date.tzinfo is not None:
                date = date.astimezone(timezone.utc).replace(tzinfo=None)
            doc["date"] = date.isoformat(timespec="seconds") + "Z"

        return doc
