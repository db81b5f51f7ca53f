"""Config module exports."""

from gotestreport.config.loader import load_config
from gotestreport.config.models import (
    DiagnosticsConfig,
    GoTestReportConfig,
    LoggingConfig,
    ReportConfig,
)

__all__ = [
    "load_config",
    "GoTestReportConfig",
    "DiagnosticsConfig",
    "LoggingConfig",
    "ReportConfig",
]
