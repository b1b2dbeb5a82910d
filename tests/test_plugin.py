"""Tests for the pytest plugin (fixture, options and marker)."""

from __future__ import annotations

import pytest

from tzdata_compliance.config import ComplianceConfig

PLUGIN_CONFTEST = 'pytest_plugins = ["tzdata_compliance.pytest_plugin"]\n'


def test_fixture_reads_options(
    pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify tz_compliance_config is built from the --tz-* options."""
    monkeypatch.delenv("TZCOMPAT_PLATFORM_TZDB_VERSION", raising=False)
    pytester.makeconftest(PLUGIN_CONFTEST)
    pytester.makepyfile(
        """
        import pytest

        @pytest.mark.tz_compliance
        def test_config(tz_compliance_config):
            assert tz_compliance_config.sdk_int == 35
            assert tz_compliance_config.build_signal == 76
            assert tz_compliance_config.version_file == "/data/tz_version"
            assert tz_compliance_config.library_tzdb_version == "2024a"
            assert tz_compliance_config.platform_tzdb_version is None
        """
    )

    result = pytester.runpytest(
        "--tz-sdk-int=35",
        "--tz-icu-major=76",
        "--tz-version-file=/data/tz_version",
        "--tz-library-version=2024a",
        "--strict-markers",
    )

    result.assert_outcomes(passed=1)


def test_fixture_skips_without_sdk_int(
    pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TZCOMPAT_SDK_INT", raising=False)
    pytester.makeconftest(PLUGIN_CONFTEST)
    pytester.makepyfile(
        """
        def test_config(tz_compliance_config):
            pass
        """
    )

    result = pytester.runpytest()

    result.assert_outcomes(skipped=1)


def test_sdk_int_from_environment(
    pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TZCOMPAT_SDK_INT", "34")
    pytester.makeconftest(PLUGIN_CONFTEST)
    pytester.makepyfile(
        """
        def test_config(tz_compliance_config):
            assert tz_compliance_config.sdk_int == 34
        """
    )

    result = pytester.runpytest()

    result.assert_outcomes(passed=1)


def test_staging_threshold_option(
    pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TZCOMPAT_STAGING_THRESHOLD", raising=False)
    pytester.makeconftest(PLUGIN_CONFTEST)
    pytester.makepyfile(
        """
        def test_config(tz_compliance_config):
            assert tz_compliance_config.staging_build_threshold == 80
        """
    )

    result = pytester.runpytest("--tz-sdk-int=35", "--tz-staging-threshold=80")

    result.assert_outcomes(passed=1)


def test_staging_threshold_defaults(
    pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TZCOMPAT_STAGING_THRESHOLD", raising=False)
    pytester.makeconftest(PLUGIN_CONFTEST)
    pytester.makepyfile(
        """
        def test_config(tz_compliance_config):
            assert tz_compliance_config.staging_build_threshold == 75
        """
    )

    result = pytester.runpytest("--tz-sdk-int=35")

    result.assert_outcomes(passed=1)


def test_compliance_config_is_pydantic_model() -> None:
    config = ComplianceConfig(sdk_int=34, library_tzdb_version="2024a")

    assert config.model_dump()["library_tzdb_version"] == "2024a"
