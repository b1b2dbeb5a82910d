"""Reader for the time zone module version file.

The file has a stable fixed-width preamble, so only the minimal prefix is
read and split on its delimiters. A prefix shorter than the layout requires
is a :class:`FormatError`, never a partial result.
"""

from __future__ import annotations

import os

from pydantic import ValidationError

from tzdata_compliance.constants import (
    FIELD_DELIMITER,
    FORMAT_VERSION_DELIMITER,
    MAJOR_VERSION_BYTE_COUNT,
    TZDB_VERSION_BYTE_COUNT,
    VERSION_FILE_ENCODING,
)
from tzdata_compliance.errors import FormatError
from tzdata_compliance.models import VersionDescriptor
from tzdata_compliance.observability.logging import get_logger

logger = get_logger(__name__)

StrPath = str | os.PathLike[str]


def read_bytes(path: StrPath, max_bytes: int) -> bytes:
    """Read up to ``max_bytes`` bytes from ``path``.

    The result is shorter than ``max_bytes`` if the file is shorter.

    Raises:
        ValueError: If ``max_bytes`` is not positive.
        OSError: If the file cannot be opened or read.
    """
    if max_bytes <= 0:
        raise ValueError(f"max_bytes == {max_bytes}")

    with open(path, "rb") as f:
        return f.read(max_bytes)


def _decode_prefix(data: bytes, expected_length: int, path: str | None) -> str:
    data = data[:expected_length]
    if len(data) != expected_length:
        raise FormatError(
            f"expected {expected_length} bytes, got {len(data)}",
            path=path,
            details={"expected_length": expected_length, "actual_length": len(data)},
        )
    try:
        return data.decode(VERSION_FILE_ENCODING)
    except UnicodeDecodeError as exc:
        raise FormatError(f"prefix is not {VERSION_FILE_ENCODING}: {exc}", path=path) from exc


def _split_fields(text: str, delimiter: str, min_components: int, path: str | None) -> list[str]:
    components = text.split(delimiter)
    if len(components) < min_components:
        raise FormatError(
            f"expected at least {min_components} '{delimiter}'-delimited components in {text!r}",
            path=path,
        )
    return components


def parse_major_format_version(data: bytes, path: str | None = None) -> str:
    """Extract ``xxx`` from the first 7 bytes of ``data``; later bytes are ignored."""
    text = _decode_prefix(data, MAJOR_VERSION_BYTE_COUNT, path)
    return _split_fields(text, FORMAT_VERSION_DELIMITER, 1, path)[0]


def parse_tzdb_version(data: bytes, path: str | None = None) -> str:
    """Extract ``zzzzz`` from the first 13 bytes of ``data``; later bytes are ignored."""
    text = _decode_prefix(data, TZDB_VERSION_BYTE_COUNT, path)
    return _split_fields(text, FIELD_DELIMITER, 2, path)[1]


def parse_descriptor(data: bytes, path: str | None = None) -> VersionDescriptor:
    """Decode the 13-byte prefix of ``data`` into a :class:`VersionDescriptor`.

    Field widths are enforced here, unlike the single-field extractions.
    """
    text = _decode_prefix(data, TZDB_VERSION_BYTE_COUNT, path)
    fields = _split_fields(text, FIELD_DELIMITER, 2, path)
    format_version = fields[0].split(FORMAT_VERSION_DELIMITER, 1)
    try:
        return VersionDescriptor(
            major_format_version=format_version[0],
            minor_format_version=format_version[1] if len(format_version) > 1 else "",
            tzdb_version=fields[1],
        )
    except ValidationError as exc:
        raise FormatError(
            f"unexpected field widths in {text!r}",
            path=path,
            details={"errors": [err["msg"] for err in exc.errors()]},
        ) from exc


def read_major_format_version(path: StrPath) -> str:
    """Read the major format version (``xxx``) from the version file."""
    data = read_bytes(path, MAJOR_VERSION_BYTE_COUNT)
    major = parse_major_format_version(data, path=os.fspath(path))
    logger.debug("descriptor.read", path=os.fspath(path), major_format_version=major)
    return major


def read_tzdb_version(path: StrPath) -> str:
    """Read the tzdb data set version (``zzzzz``) from the version file."""
    data = read_bytes(path, TZDB_VERSION_BYTE_COUNT)
    tzdb_version = parse_tzdb_version(data, path=os.fspath(path))
    logger.debug("descriptor.read", path=os.fspath(path), tzdb_version=tzdb_version)
    return tzdb_version


def read_descriptor(path: StrPath) -> VersionDescriptor:
    """Read and decode the full fixed-width preamble of the version file."""
    data = read_bytes(path, TZDB_VERSION_BYTE_COUNT)
    return parse_descriptor(data, path=os.fspath(path))
