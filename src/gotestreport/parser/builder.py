"""Report builder: the state machine that turns classified lines into a Report.

Lines must be fed in input order. Each line is classified, dispatched to the
handler for its kind, and then filed into the create or destroy log buffer of
the test currently running.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from gotestreport.config.constants import FAILURE_TEST_NAME
from gotestreport.parser.models import Package, Report, Result, Test
from gotestreport.parser.patterns import LineKind, LineMatch, classify, is_destroy_start
from gotestreport.parser.phases import PhaseAnalyzer

logger = logging.getLogger(__name__)


def parse_seconds(value: str) -> float:
    """Parse a duration field; anything unparseable counts as zero."""
    try:
        return float(value)
    except ValueError:
        return 0.0


class ReportBuilder:
    """Accumulates packages and tests from `go test -v` output, one line at a time."""

    def __init__(self, analyzer: PhaseAnalyzer | None = None) -> None:
        self._analyzer = analyzer or PhaseAnalyzer()
        self.report = Report()

        # Tests of the package being read, in start order
        self.tests: list[Test] = []
        # Name of the test that output lines belong to
        self.current = ""
        self.coverage_pct = ""
        # Unattributed output, flushed into the next test that reports a status
        self.buffer: list[str] = []
        # Package name -> build failure output
        self.package_captures: dict[str, list[str]] = {}
        # Package whose build output is being captured; empty when not capturing
        self.captured_package = ""
        self.seen_summary = False
        self.in_create_phase = True
        # Sum of test times, the package time when no result line shows up
        self.tests_time = 0.0

        self._handlers: dict[LineKind, Callable[[LineMatch], None]] = {
            LineKind.TEST_START: self.on_test_start,
            LineKind.PACKAGE_RESULT: self.on_package_result,
            LineKind.STATUS: self.on_status,
            LineKind.COVERAGE: self.on_coverage,
            LineKind.OUTPUT: self.on_output,
            LineKind.BUILD_CAPTURE_START: self.on_build_capture_start,
            LineKind.SUMMARY: self.on_summary,
            LineKind.UNRECOGNIZED: self.on_unrecognized,
        }

    def feed(self, line: str) -> None:
        match = classify(line)
        self._handlers[match.kind](match)
        self.track_phase(line)

    def find_test(self, name: str) -> Test | None:
        """Most recently started test with this name."""
        for test in reversed(self.tests):
            if test.name == name:
                return test
        return None

    # -------------------------------------------------------------------------
    # Line handlers
    # -------------------------------------------------------------------------

    def on_test_start(self, match: LineMatch) -> None:
        self.current = match.group(1).strip()
        self.tests.append(Test(name=self.current))
        # Output after a test starts no longer belongs to a package build
        self.captured_package = ""
        self.in_create_phase = True
        self.seen_summary = False

    def on_package_result(self, match: LineMatch) -> None:
        outcome, name, duration, build_failure, coverage = match.groups
        if coverage:
            self.coverage_pct = coverage

        if build_failure.endswith("failed]") and not self.tests:
            self._synthesize(build_failure, list(self.package_captures.get(name, [])))
        elif outcome == "FAIL" and not self.tests and self.buffer:
            self._synthesize(FAILURE_TEST_NAME, list(self.buffer))

        self._finalize(name, parse_seconds(duration))

    def on_status(self, match: LineMatch) -> None:
        status, name, duration = match.groups
        self.current = name
        test = self.find_test(name)
        if test is None:
            return

        test.result = Result[status]
        if test.result != Result.PASS:
            test.clear_phase_text()

        test.output.extend(self.buffer)
        self.buffer = []

        test.time = parse_seconds(duration)
        test.finished = True
        if test.result == Result.PASS:
            self._analyzer.analyze(test)

        self.tests_time += test.time

    def on_coverage(self, match: LineMatch) -> None:
        self.coverage_pct = match.group(1)

    def on_output(self, match: LineMatch) -> None:
        if self.captured_package:
            self._capture(match.line)
            return
        test = self.find_test(self.current)
        if test is not None:
            test.output.append(match.group(1))

    def on_build_capture_start(self, match: LineMatch) -> None:
        self.captured_package = match.group(1)

    def on_summary(self, match: LineMatch) -> None:
        if self.captured_package:
            self._capture(match.line)
        else:
            # Nothing after the summary belongs to the test
            self.seen_summary = True

    def on_unrecognized(self, match: LineMatch) -> None:
        if self.captured_package:
            self._capture(match.line)
        elif not self.seen_summary:
            self.buffer.append(match.line)

    def track_phase(self, line: str) -> None:
        """File ``line`` into the create or destroy log of the running test."""
        test = self.find_test(self.current)
        if test is None or test.finished:
            return
        if is_destroy_start(line):
            self.in_create_phase = False
            test.destroy_text.append(line)
        elif self.in_create_phase:
            test.create_text.append(line)
        else:
            test.destroy_text.append(line)

    # -------------------------------------------------------------------------
    # Package boundaries
    # -------------------------------------------------------------------------

    def finish(self, package_name: str = "") -> Report:
        """Close the input. Open tests, or a report with no packages at all,
        become one final package named ``package_name``."""
        if self.tests or not self.report.packages:
            self._finalize(package_name, self.tests_time)
        return self.report

    def _capture(self, line: str) -> None:
        self.package_captures.setdefault(self.captured_package, []).append(line)

    def _synthesize(self, name: str, output: list[str]) -> None:
        logger.debug("Synthesized test %s with %d output lines", name, len(output))
        self.tests.append(Test(name=name, result=Result.FAIL, output=output, finished=True))

    def _finalize(self, name: str, duration: float) -> None:
        package = Package(
            name=name,
            time=duration,
            tests=self.tests,
            coverage_pct=self.coverage_pct,
        )
        self.report.packages.append(package)
        logger.debug(
            "Package finalized: %s (%d tests, %d failures)",
            name,
            len(package.tests),
            package.failures,
        )

        self.buffer = []
        self.tests = []
        self.coverage_pct = ""
        self.current = ""
        self.tests_time = 0.0
