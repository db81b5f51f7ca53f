"""Timing diagnostics sinks for the phase analyzer.

The analyzer hands every analyzed test to a sink. The default sink drops it,
so parsing has no side effects unless a caller opts in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog
from rich.console import Console

from gotestreport.core.formatting import format_duration, format_seconds
from gotestreport.parser.models import Action, ResourceTime, Test

_RULE = "-" * 48


def _actions(actions: list[Action]) -> str:
    return "[" + " ".join(a.name for a in actions) + "]"


def render_timings(test: Test) -> list[str]:
    """Fixed-layout timing summary for one analyzed test."""
    lines = [
        _RULE,
        "",
        f"TEST             : {test.name}",
        f"Time             : {format_duration(test.time)}",
        f"CreateTime       : {format_duration(test.create_time)}",
    ]
    destroy: ResourceTime | None = test.cleanup[0] if test.cleanup else None
    if destroy is not None:
        lines.append(f"DestroyTime      : {format_duration(destroy.duration)}")
    else:
        lines.append("DestroyTime      : 0.0")
    lines += [
        f"CreateDestroyTime: {format_duration(test.create_destroy_time)}",
        f"Overhead         : {format_duration(test.overhead)}",
        "",
        "  CREATE STEP:",
    ]
    for step in test.steps:
        lines += [
            f"    TestStep      : {_actions(step.actions)}",
            f"    TestStep      : {step.resource_name}",
            f"    TestStep      : {format_seconds(step.duration)}",
            "",
        ]
    lines.append("  DESTROY STEP:")
    if destroy is not None:
        lines += [
            f"    DestroyStep   : {_actions(destroy.actions)}",
            f"    DestroyStep   : {destroy.resource_name}",
            f"    DestroyStep   : {format_seconds(destroy.duration)}",
        ]
    else:
        lines.append("    DestroyStep   : N/A")
    lines.append("")
    return lines


class TimingDiagnostics(ABC):
    """Receives each passing test once its phases have been analyzed."""

    @abstractmethod
    def report(self, test: Test) -> None: ...


class NullDiagnostics(TimingDiagnostics):
    def report(self, test: Test) -> None:  # noqa: ARG002
        return None


class ConsoleDiagnostics(TimingDiagnostics):
    """Prints the timing summary to stderr (stdout carries the report)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def report(self, test: Test) -> None:
        for line in render_timings(test):
            self._console.print(line, markup=False, highlight=False)


class LogDiagnostics(TimingDiagnostics):
    """Emits one structured DEBUG event per analyzed test."""

    def __init__(self) -> None:
        self._log = structlog.get_logger(__name__)

    def report(self, test: Test) -> None:
        self._log.debug(
            "phase_timings",
            test=test.name,
            time=test.time,
            create_time=test.create_time,
            destroy_time=test.destroy_time,
            create_destroy_time=test.create_destroy_time,
            overhead=test.overhead,
            steps=len(test.steps),
            cleanup=len(test.cleanup),
        )
