"""
Document Identifiers and URLs

Pure helpers shared by the document builder and by callers that need the
same identifier or link without building a document (e.g. for deletion).
"""

from __future__ import annotations

from typing import Optional, Union

import httpx

from ..config import settings

# Short type code appended to record ids in document uids
SHORT_NAME = "dry"

# Document type tag and front office application name
DIRECTORY = "directory"

PARAM_XPAGE_APP = "page"
PARAMETER_ID_DIRECTORY_RECORD = "id_directory_record"
PARAMETER_VIEW_DIRECTORY_RECORD = "view_directory_record"


def resource_identifier_for(
    resource_id: Union[int, str],
    resource_type: str = SHORT_NAME,
) -> str:
    """
    Return the search index uid of a resource.

    ``resource_identifier_for(42, "dry") == "42_dry"``
    """
    return f"{resource_id}_{resource_type}"


def build_record_url(
    id_record: int,
    prod_url: Optional[str] = None,
    portal_path: Optional[str] = None,
) -> str:
    """
    Build the front office URL displaying a directory record.

    Parameters
    ----------
    id_record : int
        Record to link to.

    prod_url : Optional[str]
        Production base URL. Defaults to settings.prod_url.

    portal_path : Optional[str]
        Portal page relative to the base URL. Defaults to settings.portal_path.
    """
    base = prod_url or settings.prod_url
    if not base.endswith("/"):
        base += "/"

    url = httpx.URL(
        base + (portal_path or settings.portal_path),
        params={
            PARAM_XPAGE_APP: DIRECTORY,
            PARAMETER_ID_DIRECTORY_RECORD: id_record,
            PARAMETER_VIEW_DIRECTORY_RECORD: "",
        },
    )
    return str(url)
