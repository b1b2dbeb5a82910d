"""Pytest plugin for the tzdata compliance harness.

Provides:
- Fixture: tz_compliance_config
- Marker: @pytest.mark.tz_compliance
"""

from __future__ import annotations

import os

import pytest

from tzdata_compliance.config import ComplianceConfig
from tzdata_compliance.constants import (
    DEFAULT_VERSION_FILE,
    ENV_BUILD_SIGNAL,
    ENV_LIBRARY_VERSION,
    ENV_PLATFORM_VERSION,
    ENV_SDK_INT,
    ENV_STAGING_THRESHOLD,
    ENV_VERSION_FILE,
    STAGING_ICU_MAJOR_THRESHOLD,
)

MARKER_NAME = "tz_compliance"
MARKER_HELP = "Marks a test as a time zone module compliance test."


def _env_int(name: str) -> int | None:
    value = os.environ.get(name)
    return int(value) if value else None


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for the compliance harness."""
    group = parser.getgroup("tz-compliance", description="Time zone module compliance options")
    group.addoption(
        "--tz-version-file",
        action="store",
        dest="tz_version_file",
        default=os.environ.get(ENV_VERSION_FILE, DEFAULT_VERSION_FILE),
        help=f"Version file of the module under test (default: {ENV_VERSION_FILE} or {DEFAULT_VERSION_FILE})",
    )
    group.addoption(
        "--tz-sdk-int",
        action="store",
        type=int,
        dest="tz_sdk_int",
        default=_env_int(ENV_SDK_INT),
        help=f"Platform SDK level under test (default: {ENV_SDK_INT})",
    )
    group.addoption(
        "--tz-icu-major",
        action="store",
        type=int,
        dest="tz_icu_major",
        default=_env_int(ENV_BUILD_SIGNAL),
        help=f"Bundled ICU major version (default: {ENV_BUILD_SIGNAL})",
    )
    group.addoption(
        "--tz-library-version",
        action="store",
        dest="tz_library_version",
        default=os.environ.get(ENV_LIBRARY_VERSION),
        help=f"tzdb version reported by ICU (default: {ENV_LIBRARY_VERSION})",
    )
    group.addoption(
        "--tz-platform-version",
        action="store",
        dest="tz_platform_version",
        default=os.environ.get(ENV_PLATFORM_VERSION),
        help=f"tzdb version reported by the platform (default: {ENV_PLATFORM_VERSION})",
    )
    group.addoption(
        "--tz-staging-threshold",
        action="store",
        type=int,
        dest="tz_staging_threshold",
        default=_env_int(ENV_STAGING_THRESHOLD),
        help=f"ICU major threshold of the staging rule (default: {ENV_STAGING_THRESHOLD} or {STAGING_ICU_MAJOR_THRESHOLD})",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the tz_compliance marker."""
    config.addinivalue_line("markers", f"{MARKER_NAME}: {MARKER_HELP}")


@pytest.fixture
def tz_compliance_config(request: pytest.FixtureRequest) -> ComplianceConfig:
    """Provide ComplianceConfig for compliance tests.

    Skips the test when no SDK level was given (--tz-sdk-int or TZCOMPAT_SDK_INT).
    """
    config = request.config
    sdk_int = config.getoption("tz_sdk_int", default=None)
    if sdk_int is None:
        pytest.skip("no platform SDK level configured (--tz-sdk-int)")
    threshold = config.getoption("tz_staging_threshold", default=None)
    if threshold is None:
        threshold = STAGING_ICU_MAJOR_THRESHOLD
    return ComplianceConfig(
        version_file=config.getoption("tz_version_file", default=DEFAULT_VERSION_FILE),
        sdk_int=sdk_int,
        build_signal=config.getoption("tz_icu_major", default=None),
        library_tzdb_version=config.getoption("tz_library_version", default=None),
        platform_tzdb_version=config.getoption("tz_platform_version", default=None),
        staging_build_threshold=threshold,
    )
