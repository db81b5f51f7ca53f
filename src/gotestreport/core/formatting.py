"""Duration formatting shared by renderers and timing diagnostics."""

from __future__ import annotations


def format_seconds(seconds: float) -> str:
    """Format seconds with millisecond precision, as JUnit time attributes expect.

    Examples:
        1.5 -> "1.500"
        0 -> "0.000"
    """
    return f"{seconds:.3f}"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Negative durations keep their sign; a test's overhead goes negative when
    the provisioning phases outlast the reported test time.

    Returns:
        Formatted string like "0.3s", "1.5s", "2m 30s", "1h 5m", "-4.0s"

    Examples:
        0.345 -> "0.3s"
        90.0 -> "1m 30s"
        3661.0 -> "1h 1m"
    """
    if seconds < 0:
        return "-" + format_duration(-seconds)

    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes = int(seconds // 60)
    remaining_secs = int(seconds % 60)

    if minutes < 60:
        return f"{minutes}m {remaining_secs}s"

    hours = minutes // 60
    remaining_mins = minutes % 60
    return f"{hours}h {remaining_mins}m"
