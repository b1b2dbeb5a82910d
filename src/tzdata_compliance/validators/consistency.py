"""Consistency check - every surface must report the module's tzdb version."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Sequence

from tzdata_compliance.descriptor import read_tzdb_version
from tzdata_compliance.errors import InconsistencyError, TzComplianceError
from tzdata_compliance.sources import VersionSource
from tzdata_compliance.validators.compatibility import CheckResult


@dataclass
class ConsistencyResult:
    tzdb_version: str | None
    reported: dict[str, str] = field(default_factory=dict)
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return bool(self.checks) and all(c.passed for c in self.checks)


def check_consistency(
    version_file: str | os.PathLike[str],
    sources: Sequence[VersionSource],
) -> str:
    """Assert each source reports the tzdb version found in the version file.

    Sources are compared in order; the first one that disagrees is named in
    the raised :class:`InconsistencyError`.

    Returns:
        The tzdb version all surfaces agree on.
    """
    tzdb_version = read_tzdb_version(version_file)
    for source in sources:
        reported = source.tzdb_version()
        if reported != tzdb_version:
            raise InconsistencyError(source=source.name, expected=tzdb_version, reported=reported)
    return tzdb_version


def validate_consistency(
    version_file: str | os.PathLike[str],
    sources: Sequence[VersionSource],
) -> ConsistencyResult:
    """Compare every source and record each disagreement."""
    try:
        tzdb_version = read_tzdb_version(version_file)
    except TzComplianceError as e:
        return ConsistencyResult(
            tzdb_version=None,
            checks=[CheckResult(name="version_file", passed=False, message=e.message, code=e.code)],
        )
    except OSError as e:
        return ConsistencyResult(
            tzdb_version=None,
            checks=[CheckResult(name="version_file", passed=False, message=f"Cannot read: {e}")],
        )

    result = ConsistencyResult(tzdb_version=tzdb_version)
    for source in sources:
        name = f"tzdb_version_{source.name}"
        try:
            reported = source.tzdb_version()
        except TzComplianceError as e:
            result.checks.append(CheckResult(name=name, passed=False, message=e.message, code=e.code))
            continue

        result.reported[source.name] = reported
        if reported == tzdb_version:
            result.checks.append(
                CheckResult(name=name, passed=True, message=f"{source.name} reports {reported}")
            )
        else:
            error = InconsistencyError(source=source.name, expected=tzdb_version, reported=reported)
            result.checks.append(
                CheckResult(name=name, passed=False, message=error.message, code=error.code)
            )
    return result
