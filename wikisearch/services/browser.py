"""Execute result actions chosen by the launcher."""

from __future__ import annotations

import webbrowser

from wikisearch.domain.models import DisplayResult, NoopAction, OpenUrlAction, ResultAction
from wikisearch.logging import logger


def execute_action(action: ResultAction) -> bool:
    """Run ``action`` and report whether it completed."""

    if isinstance(action, OpenUrlAction):
        opened = bool(webbrowser.open(action.url))
        logger.info("open_url", url=action.url, opened=opened)
        return opened
    if isinstance(action, NoopAction):
        return False
    raise TypeError(f"unsupported action: {action!r}")


def context_menu(result: DisplayResult) -> list[DisplayResult]:
    """The launcher defines no context menu entries for wiki results."""

    return []


__all__ = ["context_menu", "execute_action"]
