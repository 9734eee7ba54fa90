import json

import httpx
import pytest

from directory_search.core.errors import SearchSinkError
from directory_search.search.models import SearchDocument
from directory_search.search.sink import SolrSink

SOLR_URL = "http://solr.test/solr/lutece/"


class RecordingTransport:
    def __init__(self, status_code=200):
        self.requests = []
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"responseHeader": {"status": 0}})


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def document():
    return SearchDocument(
        title="Hello",
        content="Hello World",
        role="none",
        url="http://portal.test/lutece/jsp/site/Portal.jsp",
        uid="5_dry",
        type="directory",
        site="Test Site",
    )


@pytest.mark.asyncio
async def test_add_posts_document_list(transport, document):
    async with SolrSink(SOLR_URL, transport=httpx.MockTransport(transport)) as sink:
        await sink.add(document)

    request = transport.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/solr/lutece/update"
    assert request.url.params["wt"] == "json"

    body = json.loads(request.content)
    assert body == [document.to_solr()]


@pytest.mark.asyncio
async def test_delete_and_commit_payloads(transport):
    async with SolrSink(SOLR_URL, transport=httpx.MockTransport(transport)) as sink:
        await sink.delete("5_dry")
        await sink.commit()

    bodies = [json.loads(r.content) for r in transport.requests]
    assert bodies == [{"delete": {"id": "5_dry"}}, {"commit": {}}]


@pytest.mark.asyncio
async def test_http_error_wrapped(document):
    failing = RecordingTransport(status_code=500)

    async with SolrSink(SOLR_URL, transport=httpx.MockTransport(failing)) as sink:
        with pytest.raises(SearchSinkError) as exc_info:
            await sink.add(document)

    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
