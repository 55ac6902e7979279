from .exceptions import (
    CLIError,
    ConfigurationError,
    EmptyResultWarning,
    RemoteFetchError,
    ValidationRules,
)
from .logger import set_console_level, setup_logger

__all__ = [
    "CLIError",
    "ConfigurationError",
    "EmptyResultWarning",
    "RemoteFetchError",
    "ValidationRules",
    "set_console_level",
    "setup_logger",
]
