"""Snippet cleanup for MediaWiki search results."""

from __future__ import annotations

import html

SEARCHMATCH_OPEN = '<span class="searchmatch">'
SEARCHMATCH_CLOSE = "</span>"
ELLIPSIS = "..."


def strip_searchmatch(snippet: str) -> str:
    """Drop the wiki's match highlighting, leaving any other markup in place."""

    return snippet.replace(SEARCHMATCH_OPEN, "").replace(SEARCHMATCH_CLOSE, "")


def clean_snippet(snippet: str | None) -> str | None:
    """Return display text for a raw snippet, or ``None`` when there is nothing to show.

    The ellipsis is always appended, whether or not the wiki actually cut the
    excerpt short.
    """

    if not snippet:
        return None
    # TODO: append the ellipsis only when the excerpt ends before the article text does.
    return html.unescape(strip_searchmatch(snippet)) + ELLIPSIS


__all__ = ["ELLIPSIS", "clean_snippet", "strip_searchmatch"]
