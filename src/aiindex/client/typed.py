from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from aiindex.client.api import AIIndexClient
from aiindex.client.errors import DecodeFailed
from aiindex.client.models import ConfigInfo, IndexSnapshot, SectorSummary, StockDetail

T = TypeVar("T")

_INDEX = TypeAdapter(IndexSnapshot)
_HISTORY = TypeAdapter(list[IndexSnapshot])
_STOCK = TypeAdapter(StockDetail)
_STOCKS = TypeAdapter(list[StockDetail])
_SECTORS = TypeAdapter(list[SectorSummary])
_CONFIG = TypeAdapter(ConfigInfo)


def _decode(adapter: TypeAdapter[T], payload: Any, endpoint: str) -> T:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise DecodeFailed(f"unexpected payload from {endpoint}: {exc}") from exc


class TypedAIIndexClient:
    """Validates each endpoint's payload into its pydantic model."""

    def __init__(self, client: AIIndexClient) -> None:
        self._client = client

    async def index(self) -> IndexSnapshot:
        return _decode(_INDEX, await self._client.get_index(), '/api/index')

    async def index_history(self, limit: int | None = None) -> list[IndexSnapshot]:
        return _decode(_HISTORY, await self._client.get_index_history(limit), '/api/index/history')

    async def stocks(self) -> list[StockDetail]:
        return _decode(_STOCKS, await self._client.get_stocks(), '/api/stocks')

    async def stock(self, symbol: str) -> StockDetail:
        return _decode(_STOCK, await self._client.get_stock(symbol), f'/api/stocks/{symbol}')

    async def sectors(self) -> list[SectorSummary]:
        return _decode(_SECTORS, await self._client.get_sectors(), '/api/sectors')

    async def config(self) -> ConfigInfo:
        return _decode(_CONFIG, await self._client.get_config(), '/api/config')


__all__ = ["TypedAIIndexClient"]
