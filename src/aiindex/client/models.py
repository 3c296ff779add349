from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Payload(BaseModel):
    model_config = ConfigDict(extra='ignore')


class IndexSnapshot(_Payload):
    # value is null with a message until the backend has computed a snapshot
    value: float | None
    daily_change: float | None = None
    daily_change_pct: float | None = None
    timestamp: str | None = None
    message: str | None = None


class StockDetail(_Payload):
    symbol: str
    sector: str
    sector_label: str
    price: float
    change: float | None = None
    change_pct: float | None = None
    market_cap: float | None = None
    weight: float | None = None
    timestamp: str
    name: str | None = None
    exchange: str | None = None
    industry: str | None = None
    weburl: str | None = None
    logo: str | None = None
    country: str | None = None


class SectorSummary(_Payload):
    key: str
    label: str
    symbols: list[str]
    total_weight: float
    avg_change_pct: float


class ConfigInfo(_Payload):
    base_value: float
    market_cap_weight_pct: int
    index_stock_count: int
    benchmark_symbols: list[str]


__all__ = ["ConfigInfo", "IndexSnapshot", "SectorSummary", "StockDetail"]
