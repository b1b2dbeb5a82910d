"""Command-line interface for the tzdata compliance harness.

Example:
    >>> # From terminal:
    >>> # tzcompat --version
    >>> # tzcompat check --sdk-int 34 --library-version 2024a --platform-version 2024a
    >>> # tzcompat expected-version --sdk-int 35 --icu-major 76
    >>> # tzcompat read-version-file ./tz_version --json
    >>> # tzcompat policy
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from tzdata_compliance import __version__
from tzdata_compliance.config import ComplianceConfig
from tzdata_compliance.constants import DEFAULT_VERSION_FILE, STAGING_ICU_MAJOR_THRESHOLD
from tzdata_compliance.descriptor import read_descriptor
from tzdata_compliance.errors import FormatError, PolicyGapError
from tzdata_compliance.harness import run_compliance
from tzdata_compliance.observability.logging import configure_logging
from tzdata_compliance.policy import SdkLevel, build_default_policy

app = typer.Typer(help="Time zone data module compliance checks.")

# Global verbose flag
_verbose: bool = False


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show tzdata-compliance version and exit.",
    callback=_version_callback,
    is_eager=True,
)


@app.callback()
def cli(
    version: bool = VERSION_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
) -> None:
    """tzdata-compliance CLI entrypoint."""
    global _verbose
    _verbose = verbose
    if verbose:
        configure_logging(log_level="INFO", force=True)


def _release_name(sdk_int: int) -> str:
    try:
        return SdkLevel(sdk_int).name
    except ValueError:
        return "unknown"


@app.command("check")
def check(
    sdk_int: Annotated[
        Optional[int],
        typer.Option("--sdk-int", help="Platform SDK level (default: TZCOMPAT_SDK_INT)."),
    ] = None,
    version_file: Annotated[
        Optional[Path],
        typer.Option("--version-file", help=f"Module version file (default: {DEFAULT_VERSION_FILE})."),
    ] = None,
    icu_major: Annotated[
        Optional[int],
        typer.Option("--icu-major", help="Bundled ICU major version (staging release only)."),
    ] = None,
    library_version: Annotated[
        Optional[str],
        typer.Option("--library-version", help="tzdb version reported by ICU."),
    ] = None,
    platform_version: Annotated[
        Optional[str],
        typer.Option("--platform-version", help="tzdb version reported by the platform."),
    ] = None,
    zoneinfo_file: Annotated[
        Optional[Path],
        typer.Option("--zoneinfo-file", help="tzdata.zi used when --platform-version is unset."),
    ] = None,
    staging_threshold: Annotated[
        Optional[int],
        typer.Option(
            "--staging-threshold",
            help="ICU major threshold of the staging rule (default: TZCOMPAT_STAGING_THRESHOLD or 75).",
        ),
    ] = None,
    skip: Annotated[
        Optional[list[str]],
        typer.Option("--skip", help="Check category to skip (repeatable)."),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the report as JSON.")] = False,
) -> None:
    """Run the compatibility and consistency checks; exit 1 on any failure."""
    try:
        config = ComplianceConfig.from_env(
            sdk_int=sdk_int,
            version_file=str(version_file) if version_file is not None else None,
            build_signal=icu_major,
            library_tzdb_version=library_version,
            platform_tzdb_version=platform_version,
            zoneinfo_file=str(zoneinfo_file) if zoneinfo_file is not None else None,
            staging_build_threshold=staging_threshold,
            skip_checks=skip or None,
        )
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid configuration: {exc}") from exc

    report = run_compliance(config)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        for category, result in report.results.items():
            status = "PASS" if result.passed else "FAIL"
            typer.echo(f"[{status}] {category}")
            for c in result.checks:
                if _verbose or not c.passed:
                    mark = "ok" if c.passed else "FAILED"
                    typer.echo(f"  - {c.name}: {mark} - {c.message}")
        typer.echo("All checks passed." if report.passed else "Compliance checks failed.")

    if not report.passed:
        raise typer.Exit(1)


@app.command("expected-version")
def expected_version(
    sdk_int: Annotated[int, typer.Option(..., "--sdk-int", help="Platform SDK level.")],
    icu_major: Annotated[
        Optional[int],
        typer.Option("--icu-major", help="Bundled ICU major version (staging release only)."),
    ] = None,
    threshold: Annotated[
        int,
        typer.Option("--staging-threshold", help="ICU major threshold of the staging rule."),
    ] = STAGING_ICU_MAJOR_THRESHOLD,
) -> None:
    """Print the major format version the policy expects for a release."""
    policy = build_default_policy(staging_threshold=threshold)
    try:
        typer.echo(policy.expected_major_version(sdk_int, icu_major))
    except PolicyGapError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(1) from exc


@app.command("read-version-file")
def read_version_file(
    path: Annotated[
        Path,
        typer.Argument(help="Version file to decode."),
    ] = Path(DEFAULT_VERSION_FILE),
    as_json: Annotated[bool, typer.Option("--json", help="Print the descriptor as JSON.")] = False,
) -> None:
    """Decode and print the fixed-width preamble of a version file."""
    try:
        descriptor = read_descriptor(path)
    except FormatError as exc:
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(1) from exc
    except OSError as exc:
        typer.echo(f"Error: cannot read {path}: {exc}", err=True)
        raise typer.Exit(1) from exc

    if as_json:
        typer.echo(json.dumps(descriptor.model_dump(), indent=2))
    else:
        typer.echo(f"Major format version: {descriptor.major_format_version}")
        typer.echo(f"Minor format version: {descriptor.minor_format_version}")
        typer.echo(f"tzdb version: {descriptor.tzdb_version}")


@app.command("policy")
def policy(
    threshold: Annotated[
        int,
        typer.Option("--staging-threshold", help="ICU major threshold of the staging rule."),
    ] = STAGING_ICU_MAJOR_THRESHOLD,
) -> None:
    """List policy entries in evaluation order."""
    table = build_default_policy(staging_threshold=threshold)
    for entry in table:
        line = f"{entry.release:>4}  {_release_name(entry.release):<20} {entry.expected}"
        if entry.label:
            line = f"{line}  ({entry.label})"
        typer.echo(line)


def main() -> None:
    """Run the tzdata-compliance CLI."""
    app()


if __name__ == "__main__":
    main()
