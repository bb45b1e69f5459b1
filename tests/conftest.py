"""Test configuration for pytest."""

import logging
import pytest

SETTINGS_ENV = ('NICEPHRASE_WORDS', 'NICEPHRASE_SEPARATOR', 'NICEPHRASE_IGNORE_CASE')


@pytest.fixture(autouse=True)
def quiet_nicephrase_loggers(monkeypatch):
    """Keep wordlist loading and CLI error reports out of test output."""
    monkeypatch.setenv('NICEPHRASE_LOG_LEVEL', 'ERROR')
    loggers = [logging.getLogger(name) for name in ('nicephrase.wordlist', 'nicephrase.cli')]
    previous = [logger.level for logger in loggers]
    for logger in loggers:
        logger.setLevel(logging.CRITICAL)
    yield
    for logger, level in zip(loggers, previous):
        logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove NICEPHRASE_* settings so tests see the defaults."""
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
