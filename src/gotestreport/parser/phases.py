"""Create/destroy phase analysis for passing provisioning tests.

A Terraform acceptance test logs a ``Step plan: DIFF:`` block listing the
resources it is about to touch (``CREATE: aws_instance.foo`` ...), then the
graph builds that apply it. The time between the ``GraphTypeApply`` build and
the next ``GraphTypePlan`` build is the create phase of that block; during the
destroy step the closing build is ``GraphTypePlanDestroy`` instead.

Each closed phase becomes a ResourceTime on the test's ``steps`` (create) or
``cleanup`` (destroy) list.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from gotestreport.config.constants import LOG_TIMESTAMP_FORMAT, LOG_TIMESTAMP_UTC_OFFSET
from gotestreport.parser.diagnostics import NullDiagnostics, TimingDiagnostics
from gotestreport.parser.models import Action, ResourceTime, Test
from gotestreport.parser.patterns import (
    DIFF_START_RE,
    GRAPH_APPLY_RE,
    GRAPH_PLAN_DESTROY_RE,
    GRAPH_PLAN_RE,
    RESOURCE_ACTION_RE,
    TIMESTAMP_RE,
)

logger = logging.getLogger(__name__)


def parse_log_timestamp(line: str) -> datetime | None:
    """Timestamp prefix of a Terraform log line, or None if it has no valid one."""
    m = TIMESTAMP_RE.search(line)
    if m is None:
        return None
    try:
        parsed = datetime.strptime(m.group(0), LOG_TIMESTAMP_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=LOG_TIMESTAMP_UTC_OFFSET)


class PhaseAnalyzer:
    """Derives per-phase timings from a passing test's raw log buffers."""

    def __init__(self, diagnostics: TimingDiagnostics | None = None) -> None:
        self._diagnostics = diagnostics or NullDiagnostics()

    def analyze(self, test: Test) -> Test:
        """Populate steps, cleanup and the derived durations of ``test`` in place."""
        create_total = self._scan(test, test.create_text, GRAPH_PLAN_RE, test.steps)
        destroy_total = self._scan(test, test.destroy_text, GRAPH_PLAN_DESTROY_RE, test.cleanup)

        test.create_time = create_total
        test.create_destroy_time = create_total + destroy_total
        test.overhead = test.time - test.create_destroy_time

        self._diagnostics.report(test)
        return test

    def _scan(
        self,
        test: Test,
        lines: list[str],
        end_re: re.Pattern[str],
        out: list[ResourceTime],
    ) -> float:
        start = next((i for i, line in enumerate(lines) if DIFF_START_RE.match(line)), None)
        if start is None:
            return 0.0

        total = 0.0
        current = ResourceTime()
        i = start
        while i < len(lines):
            line = lines[i]
            if m := RESOURCE_ACTION_RE.match(line):
                current.add_action(Action.from_string(m.group(1)))
                current.add_resource(m.group(2))
            elif GRAPH_APPLY_RE.match(line):
                end = next((x for x in range(i + 1, len(lines)) if end_re.match(lines[x])), None)
                if end is not None:
                    current.duration = self._elapsed(test, line, lines[end])
                    out.append(current)
                    total += current.duration
                    logger.debug(
                        "Phase recorded: %s [%s] %.3fs",
                        test.name,
                        current.resource_name,
                        current.duration,
                    )
                    current = ResourceTime()
                    i = end
            i += 1
        return total

    def _elapsed(self, test: Test, start_line: str, end_line: str) -> float:
        started = parse_log_timestamp(start_line)
        ended = parse_log_timestamp(end_line)
        if started is None or ended is None:
            bad = start_line if started is None else end_line
            self._warn(test, f"unparseable log timestamp: {bad!r}")
            return 0.0

        seconds = (ended - started).total_seconds()
        if seconds < 0:
            self._warn(test, f"phase ends before it starts ({seconds:.3f}s); recorded as 0")
            return 0.0
        return seconds

    @staticmethod
    def _warn(test: Test, message: str) -> None:
        test.warnings.append(message)
        logger.warning("Invalid phase timing in %s: %s", test.name, message)
