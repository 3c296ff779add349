"""Async client for the AI index backend."""

from aiindex.client import (
    AIIndexClient,
    AIIndexError,
    DecodeFailed,
    RequestFailed,
    TypedAIIndexClient,
)

__version__ = "0.1.0"

__all__ = [
    "AIIndexClient",
    "AIIndexError",
    "DecodeFailed",
    "RequestFailed",
    "TypedAIIndexClient",
    "__version__",
]
