"""Line classification for `go test -v` output.

Every pattern is compiled once at import and shared read-only by all parses.
``classify`` walks ``LINE_MATCHERS`` in priority order and reports the first
kind that matches; it knows nothing about parser state.

The provisioning patterns at the bottom recognize the Terraform acceptance
test log lines that delimit create and destroy phases.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

# =============================================================================
# go test output
# =============================================================================

TEST_START_PREFIX = "=== RUN "
BUILD_CAPTURE_PREFIX = "# "

STATUS_RE = re.compile(r"^\s*--- (PASS|FAIL|SKIP): (.+) \((\d+\.\d+)(?: seconds|s)\)$")
COVERAGE_RE = re.compile(r"^coverage:\s+(\d+\.\d+)%\s+of\s+statements(?:\sin\s.+)?$")
RESULT_RE = re.compile(
    r"^(ok|FAIL)\s+([^ ]+)\s+"
    r"(?:(\d+\.\d+)s|(\[\w+ failed]))"
    r"(?:\s+coverage:\s+(\d+\.\d+)%\sof\sstatements(?:\sin\s.+)?)?$"
)
# Sub-tests indent with 4-space groups before the hard tab; top-level tests use the tab alone.
OUTPUT_RE = re.compile(r"^(?:    )*\t(.*)")
SUMMARY_RE = re.compile(r"^(PASS|FAIL|SKIP)$")

# =============================================================================
# Terraform provisioning logs
# =============================================================================

_TS = r"\d{4}/\d{2}/\d{2}.\d{2}:\d{2}:\d{2}"

DESTROY_START_RE = re.compile(rf"^{_TS}.\SWARN\S.Test:.Executing.destroy.step")
DIFF_START_RE = re.compile(rf"^{_TS}.\SWARN\S.Test: Step plan: DIFF:")
RESOURCE_ACTION_RE = re.compile(r"^(CREATE|UPDATE|DESTROY):.(.*)")
GRAPH_APPLY_RE = re.compile(rf"^{_TS}.\SINFO\S.terraform:.building.graph:.GraphTypeApply")
GRAPH_PLAN_RE = re.compile(rf"^{_TS}.\SINFO\S.terraform:.building.graph:.GraphTypePlan")
GRAPH_PLAN_DESTROY_RE = re.compile(
    rf"^{_TS}.\SINFO\S.terraform:.building.graph:.GraphTypePlanDestroy"
)
TIMESTAMP_RE = re.compile(r"\d{4}/\d{2}/\d{2}\s\d{2}:\d{2}:\d{2}")


class LineKind(Enum):
    """Categories a single output line can fall into."""

    TEST_START = "test_start"
    PACKAGE_RESULT = "package_result"
    STATUS = "status"
    COVERAGE = "coverage"
    OUTPUT = "output"
    BUILD_CAPTURE_START = "build_capture_start"
    SUMMARY = "summary"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class LineMatch:
    """Classification of one line plus the fields its pattern captured."""

    kind: LineKind
    line: str
    groups: tuple[str, ...] = ()

    def group(self, index: int) -> str:
        """Captured group by 1-based index; unmatched optional groups read as ''."""
        return self.groups[index - 1]


def _prefix(prefix: str) -> Callable[[str], tuple[str, ...] | None]:
    def match(line: str) -> tuple[str, ...] | None:
        if line.startswith(prefix):
            return (line[len(prefix) :],)
        return None

    return match


def _regex(pattern: re.Pattern[str]) -> Callable[[str], tuple[str, ...] | None]:
    def match(line: str) -> tuple[str, ...] | None:
        m = pattern.match(line)
        if m is None:
            return None
        return tuple(g or "" for g in m.groups())

    return match


LINE_MATCHERS: tuple[tuple[LineKind, Callable[[str], tuple[str, ...] | None]], ...] = (
    (LineKind.TEST_START, _prefix(TEST_START_PREFIX)),
    (LineKind.PACKAGE_RESULT, _regex(RESULT_RE)),
    (LineKind.STATUS, _regex(STATUS_RE)),
    (LineKind.COVERAGE, _regex(COVERAGE_RE)),
    (LineKind.OUTPUT, _regex(OUTPUT_RE)),
    (LineKind.BUILD_CAPTURE_START, _prefix(BUILD_CAPTURE_PREFIX)),
    (LineKind.SUMMARY, _regex(SUMMARY_RE)),
)


def classify(line: str) -> LineMatch:
    """Classify a line. First match wins; anything else is UNRECOGNIZED."""
    for kind, matcher in LINE_MATCHERS:
        groups = matcher(line)
        if groups is not None:
            return LineMatch(kind=kind, line=line, groups=groups)
    return LineMatch(kind=LineKind.UNRECOGNIZED, line=line)


def is_destroy_start(line: str) -> bool:
    return DESTROY_START_RE.match(line) is not None
