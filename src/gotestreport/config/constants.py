"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These describe the formats emitted by `go test` and the Terraform acceptance
test harness.

For configurable values, see models.py.
"""

from datetime import timedelta, timezone

# =============================================================================
# Provisioning Log Timestamps
# =============================================================================

LOG_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
"""Layout of the timestamp prefix on Terraform log lines."""

LOG_TIMESTAMP_UTC_OFFSET = timezone(timedelta(hours=8))
"""Offset attached to log timestamps. Only differences are reported, so any fixed offset works."""

# =============================================================================
# Synthesized Tests
# =============================================================================

FAILURE_TEST_NAME = "Failure"
"""Name of the test injected for a failed package that ran no tests."""

# =============================================================================
# Rendering
# =============================================================================

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

JUNIT_FAILURE_MESSAGE = "Failed"
"""message attribute of every <failure> element."""
