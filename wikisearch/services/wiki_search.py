"""Terraria wiki search: query the MediaWiki API and build launcher results."""

from __future__ import annotations

from types import TracebackType
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from wikisearch.config import WikiSearchSettings
from wikisearch.domain.models import (
    DisplayResult,
    NoopAction,
    OpenUrlAction,
    SearchItem,
    ToolTip,
    WikiSearchResponse,
)
from wikisearch.logging import logger
from wikisearch.services.exceptions import SessionClosedError, WikiSearchError
from wikisearch.utils.snippets import clean_snippet

DEFAULT_SUBTITLE = "Terraria Wiki Search Result"
DEFAULT_TOOLTIP_TEXT = "Search Result from Terraria Wiki"


def search_params(query: str) -> dict[str, str]:
    return {
        "action": "query",
        "list": "search",
        "srsearch": query,
        "format": "json",
    }


def build_search_url(endpoint: str, query: str) -> httpx.URL:
    """Return the ``list=search`` URL for ``query`` with the query percent-encoded."""

    return httpx.URL(endpoint, params=search_params(query))


def article_url(prefix: str, title: str) -> str:
    return f"{prefix}{quote(title, safe='')}"


class WikiSearchSession:
    """Owns the shared HTTP client and turns queries into display results.

    ``open()`` must be called (or the session entered with ``async with``)
    before searching. ``close()`` may be called any number of times.
    """

    def __init__(
        self,
        settings: WikiSearchSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or WikiSearchSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._icon_path: str | None = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def open(self) -> None:
        if self._client is not None:
            return
        self._icon_path = self._settings.icon_path
        self._client = httpx.AsyncClient(
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            },
            timeout=self._settings.request_timeout_seconds,
            transport=self._transport,
        )
        logger.info("wiki_search_session_opened", endpoint=self._settings.search_endpoint())

    async def close(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.aclose()
        logger.info("wiki_search_session_closed")

    async def __aenter__(self) -> WikiSearchSession:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def search(self, query: str) -> list[DisplayResult]:
        """Return one result per wiki match, or a single placeholder row."""

        try:
            payload = await self._fetch(query)
        except WikiSearchError as exc:
            logger.warning("wiki_search_failed", query=query, error=str(exc))
            return [self._failure_result()]

        items = payload.items if payload is not None else []
        if not items:
            return [self._no_results_result()]

        logger.info(
            "wiki_search_completed",
            query=query,
            results=len(items),
            total_hits=payload.total_hits,
            has_more=payload.continue_ is not None,
        )
        return [self._to_display_result(item) for item in items]

    async def _fetch(self, query: str) -> WikiSearchResponse | None:
        client = self._require_client()
        url = build_search_url(self._settings.search_endpoint(), query)
        logger.debug("wiki_search_request", url=str(url))
        try:
            response = await client.get(url)
        except httpx.DecodingError as exc:
            logger.warning("wiki_search_unparseable", query=query, error=str(exc))
            return None
        except httpx.TransportError as exc:
            raise WikiSearchError(f"Wiki search request failed: {exc}") from exc

        if response.is_error:
            logger.warning(
                "wiki_search_bad_status", query=query, status_code=response.status_code
            )
            return None
        try:
            return WikiSearchResponse.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "wiki_search_unparseable", query=query, errors=exc.error_count()
            )
            return None

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise SessionClosedError("Wiki search session is not open.")
        return self._client

    def _to_display_result(self, item: SearchItem) -> DisplayResult:
        snippet = clean_snippet(item.snippet)
        return DisplayResult(
            title=item.title,
            subtitle=snippet or DEFAULT_SUBTITLE,
            tooltip=ToolTip(title=item.title, text=snippet or DEFAULT_TOOLTIP_TEXT),
            query_text_display=item.title,
            icon_path=self._icon_path,
            action=OpenUrlAction(url=article_url(self._settings.article_prefix(), item.title)),
        )

    def _no_results_result(self) -> DisplayResult:
        return DisplayResult(
            title="No results found",
            subtitle="Try a different search term",
            tooltip=ToolTip(
                title="No results",
                text="No articles found on Terraria Wiki for your search term.",
            ),
            icon_path=self._icon_path,
            action=NoopAction(),
        )

    def _failure_result(self) -> DisplayResult:
        return DisplayResult(
            title="Search failed",
            subtitle="Could not reach Terraria Wiki, try again later",
            tooltip=ToolTip(
                title="Search failed",
                text="The request to Terraria Wiki did not complete.",
            ),
            icon_path=self._icon_path,
            action=NoopAction(),
        )


__all__ = [
    "WikiSearchSession",
    "article_url",
    "build_search_url",
    "search_params",
]
