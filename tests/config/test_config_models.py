"""Tests for config models."""

import pytest
from pydantic import ValidationError

from gotestreport.config.models import (
    GoTestReportConfig,
    LoggingConfig,
    LogOutputConfig,
    ReportConfig,
)


class TestLogOutputConfig:
    def test_defaults_to_stderr_console(self) -> None:
        output = LogOutputConfig()

        assert output.destination == "stderr"
        assert output.format == "console"
        assert output.level is None

    def test_rejects_relative_file(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/out.log")

    def test_expands_user(self) -> None:
        output = LogOutputConfig(destination="~/gotestreport.log")

        assert not output.destination.startswith("~")


class TestReportConfig:
    def test_defaults(self) -> None:
        config = ReportConfig()

        assert config.package_name == ""
        assert config.go_version == ""
        assert config.no_xml_header is False
        assert config.set_exit_code is False
        assert config.output_format == "xml"

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            ReportConfig(output_format="yaml")  # type: ignore[arg-type]


class TestGoTestReportConfig:
    def test_sections_have_defaults(self) -> None:
        config = GoTestReportConfig()

        assert config.logging == LoggingConfig()
        assert config.report == ReportConfig()
        assert config.diagnostics.phase_timings is False

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")  # type: ignore[arg-type]
