"""fallible: success-or-failure values instead of exceptions for control flow."""

from .config import Settings, settings
from .constants import DEFAULT_ERROR_MESSAGE
from .logging_config import get_logger, setup_logging
from .result import Err, ErrorType, Ok, Result, UnwrapError

__all__ = [
    # Result
    "Ok", "Err", "Result", "ErrorType", "UnwrapError",
    "DEFAULT_ERROR_MESSAGE",
    # Configuration
    "Settings", "settings",
    # Logging
    "setup_logging", "get_logger",
]
