"""
Search Engine Sink

This module implements the write side of indexing: a client that pushes
documents to a Solr core through its JSON update handler. It is responsible
for:

- Adding or replacing one document at a time (keyed by uid)
- Deleting documents by uid
- Committing once a pass is over
- Isolating transport errors behind ``SearchSinkError``
"""

from __future__ import annotations

from typing import Any, Optional, Protocol
import logging

import httpx

from .models import SearchDocument
from ..config import settings
from ..core.errors import SearchSinkError

logger = logging.getLogger("directory_search.sink")


class SearchSink(Protocol):
    async def add(self, document: SearchDocument) -> None:
        ...

    async def delete(self, uid: str) -> None:
        ...

    async def commit(self) -> None:
        ...


class SolrSink:
    """
    Asynchronous Solr update client.

    One ``httpx.AsyncClient`` is kept for the sink's lifetime; use the sink
    as an async context manager or call ``aclose()``.
    """

    def __init__(
        self,
        solr_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Parameters
        ----------
        solr_url : Optional[str]
            Base URL of the Solr core. Defaults to settings.solr_url.

        timeout : Optional[float]
            HTTP timeout for each request. Defaults to settings.solr_timeout.

        transport : Optional[httpx.AsyncBaseTransport]
            Custom transport, mainly for tests.
        """
        base = str(solr_url or settings.solr_url).rstrip("/")
        self.update_url = f"{base}/update"
        self._client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.solr_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "SolrSink":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def add(self, document: SearchDocument) -> None:
        await self._post([document.to_solr()], action="add")

    async def delete(self, uid: str) -> None:
        await self._post({"delete": {"id": uid}}, action="delete")

    async def commit(self) -> None:
        await self._post({"commit": {}}, action="commit")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _post(self, payload: Any, action: str) -> None:
        try:
            response = await self._client.post(
                self.update_url,
                json=payload,
                params={"wt": "json"},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(
                "Solr %s request failed (%s): %s",
                action,
                type(exc).__name__,
                str(exc),
            )
            raise SearchSinkError(
                f"Solr {action} failed: {type(exc).__name__}"
            ) from exc
