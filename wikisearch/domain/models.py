"""Pydantic models for the wiki API payload and the launcher result records."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SearchItem(_ApiModel):
    title: str
    snippet: str | None = None
    ns: int | None = None
    pageid: int | None = None
    size: int | None = None
    wordcount: int | None = None
    timestamp: datetime | None = None

    @field_validator("ns", "pageid", "size", "wordcount", "timestamp", mode="wrap")
    @classmethod
    def _drop_invalid_diagnostics(cls, value: Any, handler):
        # Diagnostics only; invalid values become None.
        try:
            return handler(value)
        except ValidationError:
            return None


class SearchInfo(_ApiModel):
    totalhits: int = 0


class QueryInfo(_ApiModel):
    searchinfo: SearchInfo | None = None
    search: list[SearchItem] | None = None


class ContinueInfo(_ApiModel):
    sroffset: int = 0
    continue_: str | None = Field(default=None, alias="continue")


class WikiSearchResponse(_ApiModel):
    """Deserialized ``list=search`` payload.

    Missing ``query`` or ``query.search`` means the wiki had no matches.
    """

    batchcomplete: str | None = None
    continue_: ContinueInfo | None = Field(default=None, alias="continue")
    query: QueryInfo | None = None

    @property
    def items(self) -> list[SearchItem]:
        if self.query is None or not self.query.search:
            return []
        return self.query.search

    @property
    def total_hits(self) -> int | None:
        if self.query is None or self.query.searchinfo is None:
            return None
        return self.query.searchinfo.totalhits


class OpenUrlAction(BaseModel):
    kind: Literal["open_url"] = "open_url"
    url: str


class NoopAction(BaseModel):
    kind: Literal["noop"] = "noop"


ResultAction = Annotated[Union[OpenUrlAction, NoopAction], Field(discriminator="kind")]


class ToolTip(BaseModel):
    title: str
    text: str


class DisplayResult(BaseModel):
    """A single row handed back to the launcher."""

    title: str
    subtitle: str
    tooltip: ToolTip
    query_text_display: str = ""
    icon_path: str | None = None
    action: ResultAction


__all__ = [
    "ContinueInfo",
    "DisplayResult",
    "NoopAction",
    "OpenUrlAction",
    "QueryInfo",
    "ResultAction",
    "SearchInfo",
    "SearchItem",
    "ToolTip",
    "WikiSearchResponse",
]
