from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aiindex.observability.logging import LOG_LEVELS


def _parse_base_url(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip().rstrip('/')


def _parse_log_level(value: Any) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
    return level


def _positive(value: int) -> int:
    if value <= 0:
        raise ValueError('history_limit must be a positive integer')
    return value


BaseURL = Annotated[str, BeforeValidator(_parse_base_url)]
PositiveLimit = Annotated[int, AfterValidator(_positive)]
LogLevel = Annotated[str, BeforeValidator(_parse_log_level)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_prefix='AIINDEX_',
        extra='ignore',
    )

    base_url: BaseURL = 'http://localhost:8080'
    timeout_seconds: float = 10.0
    history_limit: PositiveLimit = 100
    log_level: LogLevel = 'INFO'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
