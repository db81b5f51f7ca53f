"""Report renderers."""

from __future__ import annotations

from gotestreport.core.errors import InternalError
from gotestreport.formatter.json_report import render_json, serialize_test
from gotestreport.formatter.junit import render_junit
from gotestreport.parser.models import Report

__all__ = [
    "render_json",
    "render_junit",
    "render_report",
    "serialize_test",
]


def render_report(
    report: Report,
    output_format: str,
    *,
    go_version: str = "",
    no_xml_header: bool = False,
) -> str:
    """Render ``report`` as ``xml`` or ``json``."""
    if output_format == "xml":
        return render_junit(report, go_version=go_version, no_xml_header=no_xml_header)
    if output_format == "json":
        return render_json(report)
    raise InternalError.unexpected("unknown output format", output_format=output_format)
