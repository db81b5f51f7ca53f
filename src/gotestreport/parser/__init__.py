"""Parser for `go test -v` output with Terraform phase timings."""

from gotestreport.parser.builder import ReportBuilder
from gotestreport.parser.diagnostics import (
    ConsoleDiagnostics,
    LogDiagnostics,
    NullDiagnostics,
    TimingDiagnostics,
)
from gotestreport.parser.models import Action, Package, Report, ResourceTime, Result, Test
from gotestreport.parser.ops import parse, parse_text
from gotestreport.parser.phases import PhaseAnalyzer

__all__ = [
    "parse",
    "parse_text",
    "ReportBuilder",
    "PhaseAnalyzer",
    "TimingDiagnostics",
    "NullDiagnostics",
    "ConsoleDiagnostics",
    "LogDiagnostics",
    "Action",
    "Package",
    "Report",
    "ResourceTime",
    "Result",
    "Test",
]
