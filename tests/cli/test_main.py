"""Tests for the go-test-report command."""

from __future__ import annotations

import json
import logging
import os
import xml.etree.ElementTree as ET
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from gotestreport.cli.main import cli
from gotestreport.config import loader

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """No user config or GOTESTREPORT__ vars leak in; logging is reset afterwards."""
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "absent.yaml")
    for key in list(os.environ):
        if key.upper().startswith("GOTESTREPORT__"):
            monkeypatch.delenv(key)
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


class TestXmlOutput:
    def test_stdin_to_junit(self, mixed_run: str) -> None:
        result = runner.invoke(cli, [], input=mixed_run)

        assert result.exit_code == 0
        assert result.stdout.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        root = ET.fromstring(result.stdout.split("\n", 1)[1])
        assert root.find("testsuite").get("failures") == "1"  # type: ignore[union-attr]

    def test_no_xml_header(self, mixed_run: str) -> None:
        result = runner.invoke(cli, ["--no-xml-header"], input=mixed_run)

        assert result.stdout.startswith("<testsuites>")

    def test_go_version_and_package_name(self) -> None:
        text = "=== RUN   TestA\n--- PASS: TestA (0.10s)\n"

        result = runner.invoke(
            cli, ["--go-version", "go1.22.1", "--package-name", "compiled.test"], input=text
        )

        root = ET.fromstring(result.stdout.split("\n", 1)[1])
        suite = root.find("testsuite")
        assert suite is not None
        assert suite.get("name") == "compiled.test"
        prop = suite.find("properties/property")
        assert prop is not None
        assert prop.get("value") == "go1.22.1"

    def test_input_file(self, tmp_path: Path, acceptance_run: str) -> None:
        path = tmp_path / "run.log"
        path.write_text(acceptance_run)

        result = runner.invoke(cli, ["--input", str(path)])

        assert result.exit_code == 0
        assert 'name="TestAccInstance_basic"' in result.stdout


class TestJsonOutput:
    def test_format_json(self, acceptance_run: str) -> None:
        result = runner.invoke(cli, ["--format-json"], input=acceptance_run)

        assert result.exit_code == 0
        (test,) = json.loads(result.stdout.strip())
        assert test["Name"] == "TestAccInstance_basic"
        assert test["Steps"][0]["Duration"] == pytest.approx(10.0)

    def test_format_from_config_file(self, tmp_path: Path, mixed_run: str) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("report:\n  output_format: json\n")

        result = runner.invoke(cli, ["--config", str(config)], input=mixed_run)

        assert [t["Name"] for t in json.loads(result.stdout.strip())] == [
            "TestPass",
            "TestFail",
            "TestSkip",
        ]


class TestExitCode:
    def test_failures_ignored_by_default(self, mixed_run: str) -> None:
        assert runner.invoke(cli, [], input=mixed_run).exit_code == 0

    def test_set_exit_code_with_failures(self, mixed_run: str) -> None:
        result = runner.invoke(cli, ["--set-exit-code"], input=mixed_run)

        assert result.exit_code == 1
        assert "<testsuites>" in result.stdout

    def test_set_exit_code_all_passing(self, acceptance_run: str) -> None:
        assert runner.invoke(cli, ["--set-exit-code"], input=acceptance_run).exit_code == 0


class TestUndecodableInput:
    """Invalid UTF-8 bytes are replaced, never fatal."""

    RAW = b"=== RUN   TestA\n\t\xff broken byte\n--- PASS: TestA (1.00s)\nok  \tpkg\t1.0s\n"

    def _assert_one_passing_case(self, stdout: str) -> None:
        root = ET.fromstring(stdout.split("\n", 1)[1])
        cases = root.findall("testsuite/testcase")
        assert [c.get("name") for c in cases] == ["TestA"]
        assert list(cases[0]) == []

    def test_input_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.log"
        path.write_bytes(self.RAW)

        result = runner.invoke(cli, ["--input", str(path)])

        assert result.exit_code == 0
        self._assert_one_passing_case(result.stdout)

    def test_stdin(self) -> None:
        result = runner.invoke(cli, [], input=self.RAW)

        assert result.exit_code == 0
        self._assert_one_passing_case(result.stdout)

    def test_replacement_character_kept_in_output(self) -> None:
        result = runner.invoke(cli, ["--format-json"], input=self.RAW)

        (test,) = json.loads(result.stdout.strip())
        assert test["Output"] == ["\ufffd broken byte"]


class TestErrors:
    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml")], input="")

        assert result.exit_code == 1
        assert "Config file not found" in result.stderr

    def test_invalid_config_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOTESTREPORT__REPORT__OUTPUT_FORMAT", "yaml")

        result = runner.invoke(cli, [], input="")

        assert result.exit_code == 1
        assert "CONFIG_INVALID_VALUE" in result.stderr


class TestDiagnostics:
    def test_phase_timings_go_to_stderr(self, acceptance_run: str) -> None:
        result = runner.invoke(cli, ["--phase-timings"], input=acceptance_run)

        assert result.exit_code == 0
        assert "CreateDestroyTime: 15.0s" in result.stderr
        assert "CreateDestroyTime" not in result.stdout

    def test_quiet_by_default(self, acceptance_run: str) -> None:
        result = runner.invoke(cli, [], input=acceptance_run)

        assert result.stderr == ""

    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "go-test-report" in result.stdout
