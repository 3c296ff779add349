from __future__ import annotations

import logging

import pytest

from aiindex.observability.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore(restore_logging):
    yield


@pytest.mark.parametrize('level', ['INFO', 'warning', 'ERROR'])
def test_transport_loggers_raised_to_warning(level):
    configure_logging(level)
    assert logging.getLogger().level == logging.getLevelName(level.upper())
    assert logging.getLogger('httpx').level == logging.WARNING
    assert logging.getLogger('httpcore').level == logging.WARNING
    assert not logging.getLogger('httpx').isEnabledFor(logging.INFO)


def test_debug_lets_transport_logs_through():
    configure_logging('INFO')
    configure_logging('debug')
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger('httpx').level == logging.NOTSET
    assert logging.getLogger('httpx').isEnabledFor(logging.DEBUG)


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match='unknown log level'):
        configure_logging('bogus')
