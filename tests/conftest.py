from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import httpx
import pytest

from aiindex.client.api import AIIndexClient
from aiindex.config import settings as settings_module

BASE_URL = "http://aiindex.test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("AIINDEX_BASE_URL", "AIINDEX_TIMEOUT_SECONDS", "AIINDEX_HISTORY_LIMIT", "AIINDEX_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


class Recorder:
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_path(self) -> str:
        return self.requests[-1].url.raw_path.decode()


@pytest.fixture
def make_client() -> Callable[[Handler], tuple[AIIndexClient, Recorder]]:
    def factory(handler: Handler) -> tuple[AIIndexClient, Recorder]:
        recorder = Recorder(handler)
        client = AIIndexClient(
            BASE_URL,
            session_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(recorder)),
        )
        return client, recorder

    return factory


@pytest.fixture
def restore_logging() -> Iterator[None]:
    names = ("", "httpx", "httpcore")
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
