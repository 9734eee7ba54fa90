"""
Document Builder Tests

Covers:
- Field concatenation order
- Title resolution and both fallbacks
- Content markup stripping, verbatim summary
- Role, uid, url and constant fields
"""

import pytest
from unittest.mock import patch

from directory_search.core.errors import MarkupError
from directory_search.indexer import classify_entries

from conftest import CREATED, PROD_URL, SITE_NAME, make_entry, make_record


async def build_for(builder, repo, record):
    sets = await classify_entries(repo, record.id_directory)
    return await builder.build_from_sets(record, sets)


class TestConcat:

    @pytest.mark.asyncio
    async def test_entry_order_then_value_order(self, builder, repo, add_value):
        first = make_entry(1)
        second = make_entry(2)
        record = make_record(7)
        add_value(7, 2, "b1")
        add_value(7, 1, "a1")
        add_value(7, 2, "b2")
        add_value(7, 1, "a2")

        text = await builder.concat(record, [first, second])

        assert text == "a1 a2 b1 b2"

    @pytest.mark.asyncio
    async def test_repeated_values_are_kept(self, builder, add_value):
        record = make_record(7)
        add_value(7, 1, "same")
        add_value(7, 1, "same")

        assert await builder.concat(record, [make_entry(1)]) == "same same"

    @pytest.mark.asyncio
    async def test_only_values_of_this_record(self, builder, add_value):
        add_value(7, 1, "mine")
        add_value(8, 1, "other")

        assert await builder.concat(make_record(7), [make_entry(1)]) == "mine"

    @pytest.mark.asyncio
    async def test_no_entries_gives_empty_string(self, builder, add_value):
        add_value(7, 1, "ignored")

        assert await builder.concat(make_record(7), []) == ""


class TestTitleResolution:

    @pytest.mark.asyncio
    async def test_title_entry_keeps_markup_content_is_stripped(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True, is_indexed_as_title=True))
        repo.add_entry(make_entry(2, is_indexed_as_summary=True))
        record = make_record(5)
        add_value(5, 1, "Hello <b>World</b>")
        add_value(5, 2, "Short desc")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Hello <b>World</b>"
        assert doc.content == "Hello World"
        assert doc.summary == "Short desc"

    @pytest.mark.asyncio
    async def test_fallback_a_uses_first_content_entry(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, "Only value")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Only value"
        assert doc.content == "Only value"

    @pytest.mark.asyncio
    async def test_fallback_a_never_uses_later_content_entry(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        repo.add_entry(make_entry(2, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, "First")
        add_value(5, 2, "Second")

        doc = await build_for(builder, repo, record)

        assert doc.title == "First"
        assert doc.content == "First Second"

    @pytest.mark.asyncio
    async def test_fallback_a_blank_first_entry_gives_no_document(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        repo.add_entry(make_entry(2, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, "   ")
        add_value(5, 2, "Second")

        assert await build_for(builder, repo, record) is None

    @pytest.mark.asyncio
    async def test_fallback_b_when_title_values_empty(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed_as_title=True))
        repo.add_entry(make_entry(2, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, "")
        add_value(5, 2, "Backup title text")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Backup title text"

    @pytest.mark.asyncio
    async def test_fallback_b_treats_whitespace_as_blank(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed_as_title=True))
        repo.add_entry(make_entry(2, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, " \t\n ")
        add_value(5, 2, "Backup")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Backup"

    @pytest.mark.asyncio
    async def test_fallback_b_when_title_entry_has_no_value(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed_as_title=True))
        repo.add_entry(make_entry(2, is_indexed=True))
        record = make_record(5)
        add_value(5, 2, "Backup")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Backup"

    @pytest.mark.asyncio
    async def test_explicit_title_wins_over_content(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        repo.add_entry(make_entry(2, is_indexed_as_title=True))
        record = make_record(5)
        add_value(5, 1, "Body")
        add_value(5, 2, "Headline")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Headline"
        assert doc.content == "Body"

    @pytest.mark.asyncio
    async def test_title_only_entries_without_content(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed_as_title=True))
        record = make_record(5)
        add_value(5, 1, "Headline")

        doc = await build_for(builder, repo, record)

        assert doc.title == "Headline"
        assert doc.content is None

    @pytest.mark.asyncio
    async def test_blank_title_without_content_entries(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed_as_title=True))
        repo.add_entry(make_entry(2, is_indexed_as_summary=True))
        record = make_record(5)
        add_value(5, 2, "A summary is not a title")

        assert await build_for(builder, repo, record) is None

    @pytest.mark.asyncio
    async def test_no_tagged_entries_gives_no_document(self, builder, repo, add_value):
        repo.add_entry(make_entry(1))
        record = make_record(5)
        add_value(5, 1, "Unindexed")

        assert await build_for(builder, repo, record) is None

    @pytest.mark.asyncio
    async def test_build_does_not_mutate_caller_entry_lists(self, builder, add_value):
        content = [make_entry(1, is_indexed=True)]
        title = []
        record = make_record(5)
        add_value(5, 1, "Value")

        await builder.build(record, title, content, [])

        assert title == []
        assert len(content) == 1


class TestContentAndSummary:

    @pytest.mark.asyncio
    async def test_nested_and_malformed_markup_is_removed(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True, is_indexed_as_title=True))
        record = make_record(5)
        add_value(5, 1, "<div><p>Open <i>nested <b>deep</p> text</div></span>")

        doc = await build_for(builder, repo, record)

        assert "<" not in doc.content
        assert ">" not in doc.content
        assert "Open nested deep" in doc.content

    @pytest.mark.asyncio
    async def test_summary_is_verbatim(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        repo.add_entry(make_entry(2, is_indexed_as_summary=True))
        record = make_record(5)
        add_value(5, 1, "Title")
        add_value(5, 2, "<em>Kept</em>")

        doc = await build_for(builder, repo, record)

        assert doc.summary == "<em>Kept</em>"

    @pytest.mark.asyncio
    async def test_blank_summary_is_omitted(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        repo.add_entry(make_entry(2, is_indexed_as_summary=True))
        record = make_record(5)
        add_value(5, 1, "Title")
        add_value(5, 2, "  ")

        doc = await build_for(builder, repo, record)

        assert doc.summary is None

    @pytest.mark.asyncio
    async def test_markup_only_content_is_omitted(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed_as_title=True))
        repo.add_entry(make_entry(2, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, "Title")
        add_value(5, 2, "<br/><hr/>")

        doc = await build_for(builder, repo, record)

        assert doc.content is None

    @pytest.mark.asyncio
    async def test_markup_failure_drops_content_only(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        record = make_record(5)
        add_value(5, 1, "Title")

        with patch(
            "directory_search.indexer.builder.strip_markup",
            side_effect=MarkupError("boom"),
        ):
            doc = await build_for(builder, repo, record)

        assert doc.title == "Title"
        assert doc.content is None


class TestDocumentFields:

    @pytest.mark.asyncio
    async def test_fixed_and_derived_fields(self, builder, repo, add_value):
        repo.add_entry(make_entry(1, is_indexed=True))
        record = make_record(42, role_key="members")
        add_value(42, 1, "Title")

        doc = await build_for(builder, repo, record)

        assert doc.uid == "42_dry"
        assert doc.type == "directory"
        assert doc.site == SITE_NAME
        assert doc.role == "members"
        assert doc.date == CREATED
        assert doc.url == (
            PROD_URL
            + "jsp/site/Portal.jsp?page=directory"
            + "&id_directory_record=42&view_directory_record="
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role_key", [None, "", "   "])
    async def test_blank_role_becomes_none(self, builder, repo, add_value, role_key):
        repo.add_entry(make_entry(1, is_indexed=True))
        record = make_record(42, role_key=role_key)
        add_value(42, 1, "Title")

        doc = await build_for(builder, repo, record)

        assert doc.role == "none"
