"""
Markup Normalization

Reduces the HTML editors paste into directory fields to the plain text that
gets indexed as document content.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from ..core.errors import MarkupError

logger = logging.getLogger("directory_search.markup")

# Elements whose text is never visible content
_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


def strip_markup(html: str) -> str:
    """
    Return the text nodes of ``html`` with tags and attributes removed.

    Text nodes are separated by a space, so paragraph and line-break
    boundaries keep words apart, then whitespace runs are collapsed to
    single spaces. Unbalanced or unclosed tags are tolerated by the parser.

    Raises
    ------
    MarkupError
        If the parser fails on the input.
    """
    if not html:
        return ""

    try:
        soup = BeautifulSoup(html, "lxml")
        for tag in soup.find_all(_INVISIBLE_TAGS):
            tag.decompose()
        text = soup.get_text(" ")
    except Exception as exc:
        logger.warning(
            "Failed to parse markup (%s): %d chars",
            type(exc).__name__,
            len(html),
        )
        raise MarkupError(
            f"Markup normalization failed: {type(exc).__name__}"
        ) from exc

    return " ".join(text.split())
