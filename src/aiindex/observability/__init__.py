from aiindex.observability.logging import LOG_LEVELS, configure_logging

__all__ = ["LOG_LEVELS", "configure_logging"]
