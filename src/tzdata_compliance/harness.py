"""Test harness for time zone module compliance evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from tzdata_compliance.config import (
    CATEGORY_COMPATIBILITY,
    CATEGORY_CONSISTENCY,
    ComplianceConfig,
)
from tzdata_compliance.constants import LIBRARY_SOURCE_NAME, PLATFORM_SOURCE_NAME
from tzdata_compliance.models import PlatformRelease
from tzdata_compliance.observability.logging import bound_context, get_logger
from tzdata_compliance.policy import SdkPolicyTable, build_default_policy
from tzdata_compliance.sources import StaticVersionSource, VersionSource, ZoneinfoVersionSource
from tzdata_compliance.validators.compatibility import (
    CheckResult,
    CompatibilityResult,
    validate_compatibility,
)
from tzdata_compliance.validators.consistency import ConsistencyResult, validate_consistency

logger = get_logger(__name__)

CategoryResult = Union[CompatibilityResult, ConsistencyResult]


@dataclass
class ComplianceReport:
    """Aggregated outcome of every category that ran."""

    release: PlatformRelease
    version_file: str
    results: dict[str, CategoryResult] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return bool(self.results) and all(r.passed for r in self.results.values())

    @property
    def failed_checks(self) -> list[CheckResult]:
        return [c for r in self.results.values() for c in r.checks if not c.passed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "version_file": self.version_file,
            "release": self.release.model_dump(),
            "categories": {
                category: {
                    "passed": result.passed,
                    "checks": [
                        {
                            "name": c.name,
                            "passed": c.passed,
                            "message": c.message,
                            "code": c.code,
                        }
                        for c in result.checks
                    ],
                }
                for category, result in self.results.items()
            },
        }


def build_policy(config: ComplianceConfig) -> SdkPolicyTable:
    return build_default_policy(staging_threshold=config.staging_build_threshold)


def build_sources(config: ComplianceConfig) -> list[VersionSource]:
    """Return the library and platform surfaces described by ``config``."""
    library = StaticVersionSource(LIBRARY_SOURCE_NAME, config.library_tzdb_version)
    platform: VersionSource
    if config.platform_tzdb_version:
        platform = StaticVersionSource(PLATFORM_SOURCE_NAME, config.platform_tzdb_version)
    else:
        platform = ZoneinfoVersionSource(PLATFORM_SOURCE_NAME, config.zoneinfo_file)
    return [library, platform]


def _log_result(category: str, result: CategoryResult) -> None:
    for check in result.checks:
        if check.passed:
            logger.info("check.passed", category=category, check=check.name)
        else:
            logger.warning(
                "check.failed",
                category=category,
                check=check.name,
                code=check.code,
                reason=check.message,
            )


def run_compliance(
    config: ComplianceConfig,
    *,
    policy: SdkPolicyTable | None = None,
    sources: list[VersionSource] | None = None,
) -> ComplianceReport:
    """Run every requested check category against the configured module."""
    release = PlatformRelease(sdk_int=config.sdk_int, build_signal=config.build_signal)
    policy = policy if policy is not None else build_policy(config)
    sources = sources if sources is not None else build_sources(config)

    report = ComplianceReport(release=release, version_file=config.version_file)
    with bound_context(sdk_int=release.sdk_int, version_file=config.version_file):
        if config.wants(CATEGORY_COMPATIBILITY):
            report.results[CATEGORY_COMPATIBILITY] = validate_compatibility(
                config.version_file, release, policy
            )
            _log_result(CATEGORY_COMPATIBILITY, report.results[CATEGORY_COMPATIBILITY])
        if config.wants(CATEGORY_CONSISTENCY):
            report.results[CATEGORY_CONSISTENCY] = validate_consistency(
                config.version_file, sources
            )
            _log_result(CATEGORY_CONSISTENCY, report.results[CATEGORY_CONSISTENCY])

    logger.info("compliance.finished", passed=report.passed, categories=list(report.results))
    return report
