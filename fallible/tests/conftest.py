"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied.

    Only loggers created inside a test may be cached by setup_logging();
    fallible.result logs through the stdlib logger, which holds no config.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def callback():
    """Spy callback returning a sentinel value."""
    return MagicMock(return_value="from-callback")


@pytest.fixture
def override_error():
    """Structured error carrying both args and a message attribute."""

    class DetailedError(Exception):
        def __init__(self, message: str, code: int):
            super().__init__(message)
            self.message = message
            self.code = code

    return DetailedError("original", code=42)
