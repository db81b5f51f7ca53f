"""Report data model.

The object graph produced by a parse: a Report holds Packages, a Package holds
Tests, and a passing Test holds the ResourceTime steps recovered from its
provisioning logs. Renderers only read these objects.

All durations are float seconds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

# =============================================================================
# Enumerations
# =============================================================================


class Result(IntEnum):
    """Outcome of a single test."""

    PASS = 0
    FAIL = 1
    SKIP = 2


class Action(IntEnum):
    """What a diff block does to a resource."""

    UNKNOWN = 0
    CREATE = 1
    UPDATE = 2
    DESTROY = 3

    @classmethod
    def from_string(cls, value: str) -> Action:
        try:
            return cls[value.upper()]
        except KeyError:
            return cls.UNKNOWN


# =============================================================================
# Entities
# =============================================================================


@dataclass
class ResourceTime:
    """One timed phase: the resources a diff block touched and how long applying it took."""

    resource_name: str = ""
    duration: float = 0.0
    actions: list[Action] = field(default_factory=list)

    def add_action(self, action: Action) -> None:
        if action not in self.actions:
            self.actions.append(action)

    def add_resource(self, name: str) -> None:
        self.resource_name = f"{self.resource_name}, {name}" if self.resource_name else name


@dataclass
class Test:
    """A single test case and its timing breakdown.

    ``create_text`` and ``destroy_text`` hold the raw log lines of the test's
    create and destroy phases. They are only meaningful for passing tests and
    are discarded when a test fails or is skipped.
    """

    __test__ = False  # keep pytest from collecting this class

    name: str
    result: Result = Result.FAIL
    time: float = 0.0
    create_time: float = 0.0
    create_destroy_time: float = 0.0
    overhead: float = 0.0
    output: list[str] = field(default_factory=list)
    create_text: list[str] = field(default_factory=list)
    destroy_text: list[str] = field(default_factory=list)
    steps: list[ResourceTime] = field(default_factory=list)
    cleanup: list[ResourceTime] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # Set once the status line arrives; later lines no longer feed the phase buffers.
    finished: bool = field(default=False, repr=False, compare=False)

    @property
    def destroy_time(self) -> float:
        return self.create_destroy_time - self.create_time

    def clear_phase_text(self) -> None:
        self.create_text = []
        self.destroy_text = []


@dataclass
class Package:
    """Test results of one compiled test binary."""

    name: str
    time: float = 0.0
    tests: list[Test] = field(default_factory=list)
    coverage_pct: str = ""

    @property
    def failures(self) -> int:
        return sum(1 for t in self.tests if t.result == Result.FAIL)

    @property
    def skipped(self) -> int:
        return sum(1 for t in self.tests if t.result == Result.SKIP)


@dataclass
class Report:
    """All packages found in one parse, in input order."""

    packages: list[Package] = field(default_factory=list)

    def failures(self) -> int:
        """Count failed tests across all packages."""
        return sum(p.failures for p in self.packages)
