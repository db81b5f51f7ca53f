"""go-test-report CLI - convert `go test -v` output to JUnit XML or JSON."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Any

import click

from gotestreport import __version__
from gotestreport.config.loader import load_config
from gotestreport.core.errors import ConfigError, InputError, OutputError
from gotestreport.core.logging import configure_logging, get_logger
from gotestreport.formatter import render_report
from gotestreport.parser import ConsoleDiagnostics, LogDiagnostics, TimingDiagnostics, parse


def _overrides(
    *,
    no_xml_header: bool,
    package_name: str | None,
    go_version: str | None,
    set_exit_code: bool,
    format_json: bool,
    phase_timings: bool,
    verbose: bool,
) -> dict[str, Any]:
    """Config kwargs for the flags that were actually given."""
    report: dict[str, Any] = {}
    if no_xml_header:
        report["no_xml_header"] = True
    if package_name is not None:
        report["package_name"] = package_name
    if go_version is not None:
        report["go_version"] = go_version
    if set_exit_code:
        report["set_exit_code"] = True
    if format_json:
        report["output_format"] = "json"

    overrides: dict[str, Any] = {}
    if report:
        overrides["report"] = report
    if phase_timings:
        overrides["diagnostics"] = {"phase_timings": True}
    if verbose:
        overrides["logging"] = {"level": "DEBUG"}
    return overrides


@click.command()
@click.version_option(version=__version__, prog_name="go-test-report")
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read go test output from FILE instead of stdin",
)
@click.option("--no-xml-header", is_flag=True, help="Do not print xml header")
@click.option(
    "--package-name",
    help="Specify a package name (compiled test have no package name in output)",
)
@click.option("--go-version", help="Value to use for the go.version property in the generated XML")
@click.option("--set-exit-code", is_flag=True, help="Set exit code to 1 if tests failed")
@click.option("--format-json", is_flag=True, help="Write detailed run data as JSON")
@click.option("--phase-timings", is_flag=True, help="Print create/destroy timings to stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: Path | None,
    no_xml_header: bool,
    package_name: str | None,
    go_version: str | None,
    set_exit_code: bool,
    format_json: bool,
    phase_timings: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Convert `go test -v` output into a JUnit XML or JSON report on stdout."""
    overrides = _overrides(
        no_xml_header=no_xml_header,
        package_name=package_name,
        go_version=go_version,
        set_exit_code=set_exit_code,
        format_json=format_json,
        phase_timings=phase_timings,
        verbose=verbose,
    )
    try:
        config = load_config(config_path, **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config=config.logging)
    log = get_logger("cli")

    diagnostics: TimingDiagnostics | None = None
    if config.diagnostics.phase_timings:
        diagnostics = ConsoleDiagnostics()
    elif config.logging.level == "DEBUG":
        diagnostics = LogDiagnostics()

    with contextlib.ExitStack() as stack:
        if input_path is not None:
            stream = stack.enter_context(input_path.open(encoding="utf-8", errors="replace"))
        else:
            stream = click.get_text_stream("stdin", errors="replace")
        try:
            report = parse(stream, config.report.package_name, diagnostics=diagnostics)
        except InputError as e:
            log.error("read_failed", error=e.to_dict())
            click.echo(f"Error reading input: {e.message}", err=True)
            ctx.exit(1)

    output_format = config.report.output_format
    try:
        rendered = render_report(
            report,
            output_format,
            go_version=config.report.go_version,
            no_xml_header=config.report.no_xml_header,
        )
        click.echo(rendered, nl=False)
    except OSError as e:
        err = OutputError.write_failed(output_format, str(e))
        log.error("write_failed", error=err.to_dict())
        click.echo(f"Error writing {output_format.upper()}: {err.message}", err=True)
        ctx.exit(1)

    failures = report.failures()
    log.info("report_written", packages=len(report.packages), failures=failures)
    if config.report.set_exit_code and failures > 0:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
