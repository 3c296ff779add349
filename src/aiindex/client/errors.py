from __future__ import annotations


class AIIndexError(Exception):
    """Base class for errors raised by the AI index client."""


class RequestFailed(AIIndexError):
    """The backend answered with a status outside 200-299."""

    def __init__(self, status_code: int, reason: str, *, url: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"{status_code} {reason}")


class DecodeFailed(AIIndexError, ValueError):
    """The response body was not JSON, or not the shape the endpoint promises."""


__all__ = ["AIIndexError", "DecodeFailed", "RequestFailed"]
