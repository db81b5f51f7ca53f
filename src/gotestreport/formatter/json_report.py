"""JSON rendering of a parsed Report.

Emits one JSON array of tests per package, one package per line. Field names
are the CamelCase names existing consumers read; enums render as their integer
values and durations as seconds.
"""

from __future__ import annotations

import json
from typing import Any

from gotestreport.parser.models import ResourceTime, Report, Test


def _resource_time(rt: ResourceTime) -> dict[str, Any]:
    return {
        "ResourceName": rt.resource_name,
        "Duration": rt.duration,
        "Action": [int(a) for a in rt.actions],
    }


def serialize_test(test: Test) -> dict[str, Any]:
    return {
        "Name": test.name,
        "Time": test.time,
        "TestOverhead": test.overhead,
        "CreateTime": test.create_time,
        "CreateDestroyTime": test.create_destroy_time,
        "Result": int(test.result),
        "Output": test.output,
        "CreateText": test.create_text,
        "DestroyText": test.destroy_text,
        "Steps": [_resource_time(rt) for rt in test.steps],
        "CleanUp": [_resource_time(rt) for rt in test.cleanup],
        "Warnings": test.warnings,
    }


def render_json(report: Report) -> str:
    lines = [
        json.dumps([serialize_test(t) for t in package.tests], separators=(",", ":"))
        for package in report.packages
    ]
    return "".join(f"{line}\n" for line in lines)
