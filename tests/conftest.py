from datetime import datetime
from typing import List

import pytest

from directory_search.directory.memory import InMemoryDirectoryRepository
from directory_search.directory.models import Directory, Entry, FieldValue, Record
from directory_search.indexer import DirectoryIndexer, DocumentBuilder
from directory_search.search.models import SearchDocument

PROD_URL = "http://portal.test/lutece/"
SITE_NAME = "Test Site"
CREATED = datetime(2024, 3, 1, 9, 30)


class RecordingSink:
    """Search sink keeping every call in memory."""

    def __init__(self) -> None:
        self.added: List[SearchDocument] = []
        self.deleted: List[str] = []
        self.commits = 0

    async def add(self, document: SearchDocument) -> None:
        self.added.append(document)

    async def delete(self, uid: str) -> None:
        self.deleted.append(uid)

    async def commit(self) -> None:
        self.commits += 1


def make_entry(id_entry, id_directory=1, position=None, **tags) -> Entry:
    return Entry(
        id_entry=id_entry,
        id_directory=id_directory,
        position=id_entry if position is None else position,
        **tags,
    )


def make_record(id_record, id_directory=1, **kwargs) -> Record:
    kwargs.setdefault("date_creation", CREATED)
    return Record(id_record=id_record, id_directory=id_directory, **kwargs)


@pytest.fixture
def repo():
    return InMemoryDirectoryRepository(
        directories=[Directory(id_directory=1, title="Contacts", is_indexed=True)],
    )


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def builder(repo):
    return DocumentBuilder(repo, site_name=SITE_NAME, prod_url=PROD_URL)


@pytest.fixture
def indexer(repo, sink, builder):
    return DirectoryIndexer(
        directories=repo,
        records=repo,
        entries=repo,
        field_values=repo,
        sink=sink,
        builder=builder,
    )


class ValueFactory:
    """Adds field values with increasing ids to a repository."""

    def __init__(self, repo: InMemoryDirectoryRepository) -> None:
        self._repo = repo
        self._next_id = 1

    def __call__(self, id_record: int, id_entry: int, value) -> FieldValue:
        field_value = FieldValue(
            id_record_field=self._next_id,
            id_record=id_record,
            id_entry=id_entry,
            value=value,
        )
        self._next_id += 1
        self._repo.add_field_value(field_value)
        return field_value


@pytest.fixture
def add_value(repo):
    return ValueFactory(repo)
