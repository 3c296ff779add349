from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# httpx logs every request at INFO; only let that through when debugging
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI.

    Transport loggers stay at WARNING unless ``level`` is DEBUG.
    """

    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")

    logging.basicConfig(level=level, format=DEFAULT_FORMAT)
    logging.getLogger().setLevel(level)
    transport_level = logging.NOTSET if level == "DEBUG" else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["DEFAULT_FORMAT", "LOG_LEVELS", "configure_logging"]
