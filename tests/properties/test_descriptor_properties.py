"""Property-based tests for the version file parser and the policy table."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tzdata_compliance.constants import (
    STAGING_CURRENT_FORMAT_VERSION,
    STAGING_ICU_MAJOR_THRESHOLD,
    STAGING_NEXT_FORMAT_VERSION,
)
from tzdata_compliance.descriptor import (
    parse_descriptor,
    parse_major_format_version,
    parse_tzdb_version,
)
from tzdata_compliance.errors import PolicyGapError
from tzdata_compliance.policy import DEFAULT_POLICY, SdkLevel

# Printable ASCII without the two delimiters
_FIELD_ALPHABET = st.characters(min_codepoint=0x20, max_codepoint=0x7E, exclude_characters=".|")


def st_major() -> st.SearchStrategy[str]:
    return st.text(alphabet="0123456789", min_size=3, max_size=3)


def st_minor() -> st.SearchStrategy[str]:
    return st.text(alphabet=_FIELD_ALPHABET, min_size=3, max_size=3)


def st_tzdb() -> st.SearchStrategy[str]:
    return st.text(alphabet=_FIELD_ALPHABET, min_size=5, max_size=5)


@given(major=st_major(), minor=st_minor(), tzdb=st_tzdb(), tail=st.binary(max_size=64))
def test_fields_extracted_independent_of_minor_and_tail(
    major: str, minor: str, tzdb: str, tail: bytes
) -> None:
    data = f"{major}.{minor}|{tzdb}|".encode("ascii") + tail

    assert parse_major_format_version(data[:7]) == major
    assert parse_tzdb_version(data[:13]) == tzdb
    descriptor = parse_descriptor(data[:13])
    assert descriptor.major_format_version == major
    assert descriptor.tzdb_version == tzdb


@given(signal=st.integers(min_value=0, max_value=10_000))
def test_staging_rule_splits_on_threshold(signal: int) -> None:
    expected = DEFAULT_POLICY.expected_major_version(SdkLevel.VANILLA_ICE_CREAM, signal)

    if signal > STAGING_ICU_MAJOR_THRESHOLD:
        assert expected == STAGING_NEXT_FORMAT_VERSION
    else:
        assert expected == STAGING_CURRENT_FORMAT_VERSION


@given(release=st.integers().filter(lambda r: r not in set(SdkLevel)))
def test_unknown_releases_never_default(release: int) -> None:
    with pytest.raises(PolicyGapError) as exc_info:
        DEFAULT_POLICY.expected_major_version(release, 76)

    assert exc_info.value.release == release
