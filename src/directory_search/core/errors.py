"""
Indexing Errors

This module defines the exception hierarchy shared by the directory indexer
and the helper that turns a failed directory into a reportable message.

Design Goals
------------
- One base class so hosts can catch every indexer failure at once
- Never abort a batch: failures become messages, not crashes
- Preserve the original cause via exception chaining
"""

from __future__ import annotations

from ..directory.models import Directory


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

class DirectorySearchError(RuntimeError):
    """Base error for directory indexing failures."""


class InvalidRecordIdError(DirectorySearchError, ValueError):
    """Raised when a record identifier is not an integer."""


class MarkupError(DirectorySearchError):
    """Raised when embedded HTML cannot be reduced to plain text."""


class SearchSinkError(DirectorySearchError):
    """Raised when the search engine rejects or cannot receive a request."""


# ---------------------------------------------------------------------
# Batch Error Reporting
# ---------------------------------------------------------------------

def format_directory_error(directory: Directory, exc: BaseException) -> str:
    """
    Build the message collected for a directory that failed to index.

    Parameters
    ----------
    directory : Directory
        The directory being processed when the failure happened.

    exc : BaseException
        The failure itself.

    Returns
    -------
    str
        A single line suitable for an indexing report.
    """
    detail = str(exc) or type(exc).__name__
    return (
        f"Error while indexing directory {directory.id_directory} "
        f"({directory.title}): {detail}"
    )
