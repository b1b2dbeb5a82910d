"""Data models for the tzdata compliance harness.

Models are frozen and reject unknown fields, the same way protocol models
are configured elsewhere: a descriptor is built fresh on every read and is
never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tzdata_compliance.constants import MAJOR_FORMAT_VERSION_WIDTH, TZDB_VERSION_WIDTH


class TzBaseModel(BaseModel):
    """Base model: immutable, strict about extra fields."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        validate_default=True,
    )


class VersionDescriptor(TzBaseModel):
    """Decoded fixed-width preamble of the time zone module version file."""

    major_format_version: str = Field(
        ...,
        min_length=MAJOR_FORMAT_VERSION_WIDTH,
        max_length=MAJOR_FORMAT_VERSION_WIDTH,
        description="Major format version (xxx)",
    )
    minor_format_version: str = Field(
        default="",
        description="Minor format version (yyy); not validated",
    )
    tzdb_version: str = Field(
        ...,
        min_length=TZDB_VERSION_WIDTH,
        max_length=TZDB_VERSION_WIDTH,
        description="tzdb data set version (zzzzz)",
    )


class PlatformRelease(TzBaseModel):
    """Platform release under test.

    ``build_signal`` is the major version of the bundled ICU library. It is
    only consulted for the staging release, which has no release identity of
    its own yet.
    """

    sdk_int: int = Field(..., ge=1, description="Platform SDK level")
    build_signal: int | None = Field(default=None, ge=0, description="ICU major version")
