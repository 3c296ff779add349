from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from aiindex.client.errors import DecodeFailed, RequestFailed
from aiindex.config.settings import get_settings

logger = logging.getLogger(__name__)


class AIIndexClient:
    """Async wrapper around the AI index REST endpoints.

    Every operation issues one GET and returns the decoded JSON body. Non-2xx
    answers raise :class:`RequestFailed`, unparseable bodies raise
    :class:`DecodeFailed`, and httpx transport errors propagate untouched.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        session_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        """``session_factory`` builds a fresh ``httpx.AsyncClient`` per call and owns
        its own timeout and transport, so it cannot be combined with either.
        Without it the client keeps one ``AsyncClient``, optionally on ``transport``.
        """
        if session_factory is not None and (timeout is not None or transport is not None):
            raise ValueError("session_factory cannot be combined with timeout or transport")
        settings = get_settings()
        self._base_url = (settings.base_url if base_url is None else base_url).rstrip('/')
        self._default_limit = settings.history_limit
        timeout = settings.timeout_seconds if timeout is None else timeout
        self._session_factory = session_factory
        self._client: httpx.AsyncClient | None = None
        if session_factory is None:
            self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_index(self) -> Any:
        return await self._json('/api/index')

    async def get_index_history(self, limit: int | None = None) -> Any:
        if limit is None:
            limit = self._default_limit
        # bool is an int subclass but never a meaningful limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        return await self._json('/api/index/history', params={'limit': limit})

    async def get_stocks(self) -> Any:
        return await self._json('/api/stocks')

    async def get_stock(self, symbol: str) -> Any:
        if not symbol:
            raise ValueError("symbol must be a non-empty string")
        return await self._json(f"/api/stocks/{quote(symbol, safe='')}")

    async def get_sectors(self) -> Any:
        return await self._json('/api/sectors')

    async def get_config(self) -> Any:
        return await self._json('/api/config')

    async def health(self) -> str:
        response = await self._get('/api/health')
        return response.text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> AIIndexClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        response = await self._get(path, params=params)
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeFailed(f"invalid JSON from {response.request.url}: {exc}") from exc

    async def _get(self, path: str, params: Mapping[str, Any] | None = None) -> httpx.Response:
        url = self._url(path)
        logger.debug("GET %s params=%s", url, dict(params or {}))
        if self._client is not None:
            response = await self._client.get(url, params=params)
        else:
            async with self._session_factory() as session:
                response = await session.get(url, params=params)
        if not response.is_success:
            logger.debug("GET %s failed with %s", url, response.status_code)
            raise RequestFailed(response.status_code, response.reason_phrase, url=str(response.request.url))
        return response

    def _url(self, path: str) -> str:
        if not path.startswith('/'):
            path = '/' + path
        return f"{self._base_url}{path}"


__all__ = ["AIIndexClient"]
