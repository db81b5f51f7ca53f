"""JUnit XML rendering of a parsed Report."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from gotestreport.config.constants import JUNIT_FAILURE_MESSAGE, XML_HEADER
from gotestreport.core.formatting import format_seconds
from gotestreport.parser.models import Package, Report, Result

# Characters XML 1.0 cannot carry, even escaped
_INVALID_XML_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _classname(package_name: str) -> str:
    return package_name.rsplit("/", 1)[-1]


def _xml_text(lines: list[str]) -> str:
    """Join output lines, replacing characters XML cannot represent with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", "\n".join(lines))


def _suite(package: Package, go_version: str) -> ET.Element:
    suite = ET.Element(
        "testsuite",
        {
            "tests": str(len(package.tests)),
            "failures": str(package.failures),
            "skipped": str(package.skipped),
            "time": format_seconds(package.time),
            "name": package.name,
        },
    )

    if go_version or package.coverage_pct:
        properties = ET.SubElement(suite, "properties")
        if go_version:
            ET.SubElement(properties, "property", {"name": "go.version", "value": go_version})
        if package.coverage_pct:
            ET.SubElement(
                properties,
                "property",
                {"name": "coverage.statements.pct", "value": package.coverage_pct},
            )

    classname = _classname(package.name)
    for test in package.tests:
        case = ET.SubElement(
            suite,
            "testcase",
            {"classname": classname, "name": test.name, "time": format_seconds(test.time)},
        )
        if test.result == Result.FAIL:
            failure = ET.SubElement(case, "failure", {"message": JUNIT_FAILURE_MESSAGE, "type": ""})
            failure.text = _xml_text(test.output)
        elif test.result == Result.SKIP:
            ET.SubElement(case, "skipped", {"message": _xml_text(test.output)})

    return suite


def render_junit(report: Report, *, go_version: str = "", no_xml_header: bool = False) -> str:
    """Render ``report`` as a JUnit ``<testsuites>`` document."""
    root = ET.Element("testsuites")
    for package in report.packages:
        root.append(_suite(package, go_version))

    ET.indent(root, space="\t")
    body = ET.tostring(root, encoding="unicode")
    header = "" if no_xml_header else XML_HEADER
    return f"{header}{body}\n"
