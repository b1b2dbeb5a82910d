"""Configuration for the tzdata compliance harness."""

from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from tzdata_compliance.constants import (
    DEFAULT_VERSION_FILE,
    DEFAULT_ZONEINFO_FILE,
    ENV_BUILD_SIGNAL,
    ENV_LIBRARY_VERSION,
    ENV_PLATFORM_VERSION,
    ENV_SDK_INT,
    ENV_STAGING_THRESHOLD,
    ENV_VERSION_FILE,
    ENV_ZONEINFO_FILE,
    STAGING_ICU_MAJOR_THRESHOLD,
)

CATEGORY_COMPATIBILITY = "compatibility"
CATEGORY_CONSISTENCY = "consistency"

CheckCategory = Literal["compatibility", "consistency"]


class ComplianceConfig(BaseModel):
    version_file: str = Field(
        default=DEFAULT_VERSION_FILE, description="Path of the time zone module version file"
    )
    sdk_int: int = Field(..., ge=1, description="Platform release (SDK level) under test")
    build_signal: Optional[int] = Field(
        default=None,
        ge=0,
        description="Bundled ICU major version; required for the staging release",
    )
    library_tzdb_version: Optional[str] = Field(
        default=None, description="tzdb version reported by the calendar/locale library"
    )
    platform_tzdb_version: Optional[str] = Field(
        default=None,
        description="tzdb version reported by the platform time utility "
        "(read from zoneinfo_file when unset)",
    )
    zoneinfo_file: str = Field(
        default=DEFAULT_ZONEINFO_FILE,
        description="tzdata.zi file used as the platform surface fallback",
    )
    staging_build_threshold: int = Field(
        default=STAGING_ICU_MAJOR_THRESHOLD,
        ge=0,
        description="ICU major version above which the staging build is the next release",
    )
    test_categories: list[CheckCategory] = Field(
        default=[CATEGORY_COMPATIBILITY, CATEGORY_CONSISTENCY],
        description="Check categories to run",
    )
    skip_checks: list[CheckCategory] = Field(
        default_factory=list,
        description="Check names to skip (e.g. 'consistency')",
    )

    @model_validator(mode="after")
    def _require_a_category(self) -> ComplianceConfig:
        if not any(self.wants(category) for category in self.test_categories):
            raise ValueError("every check category is skipped; nothing would be checked")
        return self

    def wants(self, category: str) -> bool:
        return category in self.test_categories and category not in self.skip_checks

    @classmethod
    def from_env(cls, **overrides: object) -> ComplianceConfig:
        """Build a config from TZCOMPAT_* environment variables.

        Keyword overrides that are not None take precedence over the environment.
        """
        values: dict[str, object] = {}
        env_map = {
            "version_file": ENV_VERSION_FILE,
            "sdk_int": ENV_SDK_INT,
            "build_signal": ENV_BUILD_SIGNAL,
            "library_tzdb_version": ENV_LIBRARY_VERSION,
            "platform_tzdb_version": ENV_PLATFORM_VERSION,
            "zoneinfo_file": ENV_ZONEINFO_FILE,
            "staging_build_threshold": ENV_STAGING_THRESHOLD,
        }
        for field_name, env_name in env_map.items():
            value = os.environ.get(env_name)
            if value:
                values[field_name] = value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
