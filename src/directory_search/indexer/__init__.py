"""
Indexer Package

Entry classification, document building and the directory indexer that
drives them.
"""

from .classifier import EntrySets, classify_entries
from .builder import DocumentBuilder, ROLE_NONE
from .service import DirectoryIndexer, parse_record_id

__all__ = [
    "EntrySets",
    "classify_entries",
    "DocumentBuilder",
    "ROLE_NONE",
    "DirectoryIndexer",
    "parse_record_id",
]
