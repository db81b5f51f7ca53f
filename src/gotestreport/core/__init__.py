"""Core module exports."""

from gotestreport.core.errors import (
    ConfigError,
    ErrorCode,
    GoTestReportError,
    InputError,
    InternalError,
    OutputError,
)
from gotestreport.core.formatting import format_duration, format_seconds
from gotestreport.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "GoTestReportError",
    "InputError",
    "InternalError",
    "OutputError",
    # Formatting
    "format_duration",
    "format_seconds",
    # Logging
    "configure_logging",
    "get_logger",
]
