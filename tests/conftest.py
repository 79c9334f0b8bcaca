"""Shared pytest fixtures for the wiki search tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
import structlog

from wikisearch.config import WikiSearchSettings


@pytest.fixture(autouse=True)
def log_events():
    with structlog.testing.capture_logs() as events:
        yield events


@pytest.fixture
def settings() -> WikiSearchSettings:
    return WikiSearchSettings(_env_file=None)


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Build a transport that answers every request with ``payload`` and records it."""

    def factory(payload: Any, requests: list[httpx.Request] | None = None, status_code: int = 200):
        async def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler)

    return factory
