"""Pytest fixtures for version file tests.

Fixtures (use with pytest):
    version_file_factory: Writes arbitrary bytes to a version file in tmp_path.
    staged_version_file: Bundled sample version file staged with its LICENSE.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Union

import pytest

from tzdata_compliance.testing.support import (
    copy_test_resource,
    create_temp_dir,
    delete_directory,
)

SAMPLE_VERSION_RESOURCE = "tz_version"
SAMPLE_MAJOR_FORMAT_VERSION = "007"
SAMPLE_TZDB_VERSION = "2024a"

VersionFileFactory = Callable[[Union[str, bytes]], Path]


@pytest.fixture
def version_file_factory(tmp_path: Path) -> VersionFileFactory:
    """Return a callable writing content to a fresh version file.

    Strings are encoded as ASCII; bytes are written unchanged.
    """
    counter = 0

    def _write(content: Union[str, bytes]) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / f"tz_version_{counter}"
        data = content.encode("ascii") if isinstance(content, str) else content
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def staged_version_file() -> Iterator[Path]:
    """Stage the bundled sample version file into a temp dir for the test."""
    temp_dir = create_temp_dir("tz_version_test")
    try:
        yield copy_test_resource("tzdata_compliance.testing", SAMPLE_VERSION_RESOURCE, temp_dir)
    finally:
        delete_directory(temp_dir)
