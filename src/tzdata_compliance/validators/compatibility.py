"""Compatibility check - module major format version against the release policy."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from tzdata_compliance.descriptor import read_major_format_version
from tzdata_compliance.errors import CompatibilityError, TzComplianceError
from tzdata_compliance.models import PlatformRelease
from tzdata_compliance.policy import DEFAULT_POLICY, SdkPolicyTable


@dataclass
class CheckResult:
    name: str
    passed: bool
    message: str
    code: str | None = None


@dataclass
class CompatibilityResult:
    expected: str | None
    observed: str | None
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return bool(self.checks) and all(c.passed for c in self.checks)


def check_compatibility(
    version_file: str | os.PathLike[str],
    release: PlatformRelease,
    policy: SdkPolicyTable = DEFAULT_POLICY,
) -> str:
    """Assert the module's major format version is the one ``release`` expects.

    Returns:
        The matched major format version.

    Raises:
        PolicyGapError: No policy entry for the release.
        FormatError: The version file is short or malformed.
        CompatibilityError: The versions differ.
    """
    expected = policy.expected_major_version(release.sdk_int, release.build_signal)
    observed = read_major_format_version(version_file)
    if observed != expected:
        raise CompatibilityError(
            release=release.sdk_int,
            expected=expected,
            observed=observed,
            build_signal=release.build_signal,
        )
    return observed


def validate_compatibility(
    version_file: str | os.PathLike[str],
    release: PlatformRelease,
    policy: SdkPolicyTable = DEFAULT_POLICY,
) -> CompatibilityResult:
    """Run the compatibility check and report it as a result instead of raising."""
    result = CompatibilityResult(expected=None, observed=None)

    try:
        result.expected = policy.expected_major_version(release.sdk_int, release.build_signal)
    except TzComplianceError as e:
        result.checks.append(
            CheckResult(name="policy_entry", passed=False, message=e.message, code=e.code)
        )
        return result
    result.checks.append(
        CheckResult(
            name="policy_entry",
            passed=True,
            message=f"Release {release.sdk_int} expects major format version {result.expected}",
        )
    )

    try:
        result.observed = read_major_format_version(version_file)
    except TzComplianceError as e:
        result.checks.append(
            CheckResult(name="version_file", passed=False, message=e.message, code=e.code)
        )
        return result
    except OSError as e:
        result.checks.append(
            CheckResult(name="version_file", passed=False, message=f"Cannot read: {e}")
        )
        return result

    if result.observed == result.expected:
        result.checks.append(
            CheckResult(
                name="major_format_version",
                passed=True,
                message=f"Major format version {result.observed} matches",
            )
        )
    else:
        error = CompatibilityError(
            release=release.sdk_int,
            expected=result.expected,
            observed=result.observed,
            build_signal=release.build_signal,
        )
        result.checks.append(
            CheckResult(
                name="major_format_version",
                passed=False,
                message=error.message,
                code=error.code,
            )
        )
    return result
