"""Surfaces that independently report the tzdb version.

The time zone module is not the only place the tzdb version is visible: the
calendar/locale library (ICU) and the platform time utilities each report the
version of the data they loaded. The consistency check compares them all.
"""

from __future__ import annotations

import os
import re
from typing import Callable, Protocol, runtime_checkable

from tzdata_compliance.errors import VersionSourceError

ZONEINFO_VERSION_PATTERN = re.compile(r"^#\s*version\s+(\S+)\s*$")
"""Header line of a ``tzdata.zi`` file, e.g. ``# version 2024a``."""


@runtime_checkable
class VersionSource(Protocol):
    """A named accessor returning a tzdb version string."""

    name: str

    def tzdb_version(self) -> str: ...


class StaticVersionSource:
    """Version supplied up front, e.g. from the command line or environment."""

    def __init__(self, name: str, version: str | None) -> None:
        self.name = name
        self._version = version

    def tzdb_version(self) -> str:
        if not self._version:
            raise VersionSourceError(self.name, "no tzdb version configured")
        return self._version

    def __repr__(self) -> str:
        return f"StaticVersionSource(name={self.name!r}, version={self._version!r})"


class ZoneinfoVersionSource:
    """Platform time utility surface backed by a ``tzdata.zi`` file."""

    def __init__(self, name: str, path: str | os.PathLike[str]) -> None:
        self.name = name
        self.path = os.fspath(path)

    def tzdb_version(self) -> str:
        try:
            with open(self.path, encoding="utf-8") as f:
                header = f.readline()
        except OSError as exc:
            raise VersionSourceError(
                self.name, f"cannot read {self.path}: {exc}", details={"path": self.path}
            ) from exc
        except UnicodeDecodeError as exc:
            raise VersionSourceError(
                self.name,
                f"{self.path} is not a text tzdata.zi file: {exc}",
                details={"path": self.path},
            ) from exc

        match = ZONEINFO_VERSION_PATTERN.match(header.strip())
        if match is None:
            raise VersionSourceError(
                self.name,
                f"no version header in {self.path}",
                details={"path": self.path, "header": header.strip()},
            )
        return match.group(1)

    def __repr__(self) -> str:
        return f"ZoneinfoVersionSource(name={self.name!r}, path={self.path!r})"


class CallableVersionSource:
    """Wraps any zero-argument accessor."""

    def __init__(self, name: str, func: Callable[[], str]) -> None:
        self.name = name
        self._func = func

    def tzdb_version(self) -> str:
        try:
            return self._func()
        except VersionSourceError:
            raise
        except Exception as exc:
            raise VersionSourceError(self.name, f"accessor failed: {exc!r}") from exc
