from aiindex.client.api import AIIndexClient
from aiindex.client.errors import AIIndexError, DecodeFailed, RequestFailed
from aiindex.client.models import ConfigInfo, IndexSnapshot, SectorSummary, StockDetail
from aiindex.client.typed import TypedAIIndexClient

__all__ = [
    "AIIndexClient",
    "AIIndexError",
    "ConfigInfo",
    "DecodeFailed",
    "IndexSnapshot",
    "RequestFailed",
    "SectorSummary",
    "StockDetail",
    "TypedAIIndexClient",
]
