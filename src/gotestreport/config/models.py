"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags)
2. Environment variables (GOTESTREPORT__SECTION__KEY)
3. YAML config file (--config, else ~/.config/gotestreport/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    GOTESTREPORT__<SECTION>__<KEY>=<VALUE>

Examples:
    GOTESTREPORT__LOGGING__LEVEL=DEBUG
    GOTESTREPORT__REPORT__PACKAGE_NAME=github.com/acme/provider
    GOTESTREPORT__DIAGNOSTICS__PHASE_TIMINGS=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OutputFormat = Literal["xml", "json"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOTESTREPORT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG traces every package and phase the parser records.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReportConfig(BaseModel):
    """Report rendering configuration.

    Env vars:
        GOTESTREPORT__REPORT__PACKAGE_NAME: Fallback package name
        GOTESTREPORT__REPORT__GO_VERSION: go.version property value
        GOTESTREPORT__REPORT__OUTPUT_FORMAT: xml or json
    """

    package_name: str = Field(
        default="",
        description="Package name used when the input has no package result line "
        "(compiled test binaries print none).",
    )
    go_version: str = Field(
        default="",
        description="Value for the go.version property in generated XML. Omitted when empty.",
    )
    no_xml_header: bool = Field(default=False, description="Do not print the XML header.")
    set_exit_code: bool = Field(default=False, description="Exit 1 if any test failed.")
    output_format: OutputFormat = Field(default="xml")


class DiagnosticsConfig(BaseModel):
    """Timing diagnostics configuration.

    Env vars:
        GOTESTREPORT__DIAGNOSTICS__PHASE_TIMINGS: Print per-test phase timings to stderr
    """

    phase_timings: bool = Field(
        default=False,
        description="Print a create/destroy timing breakdown for every passing test.",
    )


class GoTestReportConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    diagnostics: DiagnosticsConfig = Field(default_factory=DiagnosticsConfig)
