"""Parser entry points."""

from __future__ import annotations

import io
from typing import TextIO

from gotestreport.core.errors import InputError
from gotestreport.parser.builder import ReportBuilder
from gotestreport.parser.diagnostics import TimingDiagnostics
from gotestreport.parser.models import Report
from gotestreport.parser.phases import PhaseAnalyzer


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse(
    stream: TextIO,
    package_name: str = "",
    *,
    diagnostics: TimingDiagnostics | None = None,
) -> Report:
    """Parse `go test -v` output from ``stream`` into a Report.

    Args:
        stream: Readable text stream, consumed line by line until exhausted.
        package_name: Name for the trailing package when the output has no
            package result line (compiled test binaries print none).
        diagnostics: Sink for per-test timing summaries. Defaults to no output.

    Raises:
        InputError: If reading the stream fails. No partial report is returned.
    """
    builder = ReportBuilder(PhaseAnalyzer(diagnostics))
    line_number = 0
    while True:
        try:
            raw = stream.readline()
        except OSError as e:
            raise InputError.read_failed(str(e), line_number=line_number + 1) from e
        if not raw:
            break
        line_number += 1
        builder.feed(_strip_newline(raw))
    return builder.finish(package_name)


def parse_text(
    text: str,
    package_name: str = "",
    *,
    diagnostics: TimingDiagnostics | None = None,
) -> Report:
    """Parse already-loaded output."""
    return parse(io.StringIO(text), package_name, diagnostics=diagnostics)
