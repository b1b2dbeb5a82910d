"""Constants for the tzdata compliance harness.

The version file starts with a fixed-width ASCII preamble::

    xxx.yyy|zzzzz|....

where ``xxx`` is the major format version, ``yyy`` the minor format version
and ``zzzzz`` the tzdb data set version. Anything after the second ``|`` is
ignored.
"""

DEFAULT_VERSION_FILE = "/apex/com.android.tzdata/etc/tz/tz_version"
DEFAULT_ZONEINFO_FILE = "/usr/share/zoneinfo/tzdata.zi"

VERSION_FILE_ENCODING = "ascii"

MAJOR_VERSION_BYTE_COUNT = 7
"""Bytes covering ``xxx.yyy``."""

TZDB_VERSION_BYTE_COUNT = 13
"""Bytes covering ``xxx.yyy|zzzzz``."""

FORMAT_VERSION_DELIMITER = "."
FIELD_DELIMITER = "|"

MAJOR_FORMAT_VERSION_WIDTH = 3
TZDB_VERSION_WIDTH = 5

# Staging rule: the in-development branch reports the latest finalized SDK
# level, so the bundled ICU major version is used to tell the two apart.
STAGING_ICU_MAJOR_THRESHOLD = 75
"""ICU major version shipped with the latest finalized release."""

STAGING_CURRENT_FORMAT_VERSION = "008"
STAGING_NEXT_FORMAT_VERSION = "009"

ENV_VERSION_FILE = "TZCOMPAT_VERSION_FILE"
ENV_SDK_INT = "TZCOMPAT_SDK_INT"
ENV_BUILD_SIGNAL = "TZCOMPAT_ICU_MAJOR"
ENV_LIBRARY_VERSION = "TZCOMPAT_LIBRARY_TZDB_VERSION"
ENV_PLATFORM_VERSION = "TZCOMPAT_PLATFORM_TZDB_VERSION"
ENV_ZONEINFO_FILE = "TZCOMPAT_ZONEINFO_FILE"
ENV_STAGING_THRESHOLD = "TZCOMPAT_STAGING_THRESHOLD"

LIBRARY_SOURCE_NAME = "icu"
PLATFORM_SOURCE_NAME = "platform"
