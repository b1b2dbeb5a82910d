"""Policy table mapping platform releases to time zone module format versions.

Each time a platform release is finalized, the table gains one entry mapping
the release to the major format version it ships with. Entries are evaluated
in order and the first match wins, so a release may carry a conditional rule
followed by its fallback.

Example:
    >>> DEFAULT_POLICY.expected_major_version(SdkLevel.TIRAMISU)
    '006'
    >>> DEFAULT_POLICY.expected_major_version(SdkLevel.VANILLA_ICE_CREAM, 76)
    '009'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Iterator, Optional

from tzdata_compliance.constants import (
    STAGING_CURRENT_FORMAT_VERSION,
    STAGING_ICU_MAJOR_THRESHOLD,
    STAGING_NEXT_FORMAT_VERSION,
)
from tzdata_compliance.errors import PolicyGapError

BuildSignalPredicate = Callable[[int], bool]


class SdkLevel(IntEnum):
    """Finalized platform releases known to the policy table."""

    Q = 29
    R = 30
    S = 31
    S_V2 = 32
    TIRAMISU = 33
    UPSIDE_DOWN_CAKE = 34
    VANILLA_ICE_CREAM = 35


@dataclass(frozen=True)
class PolicyEntry:
    """One rule of the policy table.

    Attributes:
        release: Platform release (SDK level) the rule applies to
        expected: Major format version expected when the rule matches
        predicate: Optional test over the build signal; None matches always
        label: Short description shown in listings and logs
    """

    release: int
    expected: str
    predicate: Optional[BuildSignalPredicate] = None
    label: str = ""

    @property
    def conditional(self) -> bool:
        return self.predicate is not None

    def matches(self, release: int, build_signal: int | None) -> bool:
        if release != self.release:
            return False
        if self.predicate is None:
            return True
        if build_signal is None:
            raise PolicyGapError(
                release,
                build_signal,
                reason=(
                    f"Platform release {release} needs a build signal to pick "
                    f"a format version ({self.label or 'conditional rule'})"
                ),
            )
        return self.predicate(build_signal)


def staging_entries(
    release: int,
    threshold: int = STAGING_ICU_MAJOR_THRESHOLD,
    current: str = STAGING_CURRENT_FORMAT_VERSION,
    next_version: str = STAGING_NEXT_FORMAT_VERSION,
) -> list[PolicyEntry]:
    """Build the staging rule for the latest release.

    The development branch reports the latest finalized SDK level until its
    own level is assigned. Each release bumps the bundled ICU major version,
    so an ICU major above ``threshold`` means the build is the next release.
    """
    label = f"staging: icu major > {threshold}"
    return [
        PolicyEntry(
            release=release,
            expected=next_version,
            predicate=lambda signal: signal > threshold,
            label=label,
        ),
        PolicyEntry(
            release=release,
            expected=current,
            predicate=lambda signal: signal <= threshold,
            label=f"staging: icu major <= {threshold}",
        ),
    ]


def alias_entry(entries: Iterable[PolicyEntry], release: int, same_as: int) -> PolicyEntry:
    """Entry for ``release`` reusing the unconditional expectation of ``same_as``."""
    for entry in entries:
        if entry.release == same_as and not entry.conditional:
            return PolicyEntry(
                release=release,
                expected=entry.expected,
                label=f"format unchanged from {_release_name(same_as)}",
            )
    raise ValueError(f"No unconditional entry for release {same_as} to alias")


def _release_name(release: int) -> str:
    try:
        return SdkLevel(release).name
    except ValueError:
        return str(release)


class SdkPolicyTable:
    """Ordered rule table; the first matching entry wins."""

    def __init__(self, entries: Iterable[PolicyEntry]) -> None:
        self._entries: tuple[PolicyEntry, ...] = tuple(entries)
        self._check_no_dead_rules()

    def _check_no_dead_rules(self) -> None:
        settled: set[int] = set()
        for entry in self._entries:
            if entry.release in settled:
                raise ValueError(
                    f"Entry for release {entry.release} ({entry.expected}) follows an "
                    "unconditional entry for the same release and can never match"
                )
            if not entry.conditional:
                settled.add(entry.release)

    def __iter__(self) -> Iterator[PolicyEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def releases(self) -> list[int]:
        """Releases covered by the table, in first-seen order."""
        seen: dict[int, None] = {}
        for entry in self._entries:
            seen.setdefault(entry.release, None)
        return list(seen)

    def entries_for(self, release: int) -> list[PolicyEntry]:
        return [entry for entry in self._entries if entry.release == release]

    def extended(self, *entries: PolicyEntry) -> SdkPolicyTable:
        """Return a new table with ``entries`` appended."""
        return SdkPolicyTable([*self._entries, *entries])

    def expected_major_version(self, release: int, build_signal: int | None = None) -> str:
        """Return the major format version expected for ``release``.

        Raises:
            PolicyGapError: If no entry matches; the table must be extended.
        """
        for entry in self._entries:
            if entry.matches(release, build_signal):
                return entry.expected
        raise PolicyGapError(release, build_signal)


def build_default_policy(
    staging_threshold: int = STAGING_ICU_MAJOR_THRESHOLD,
    staging_current: str = STAGING_CURRENT_FORMAT_VERSION,
    staging_next: str = STAGING_NEXT_FORMAT_VERSION,
) -> SdkPolicyTable:
    """Build the policy table for all known releases.

    When a new release is finalized, replace the staging rule with an explicit
    entry and move the staging rule to the new latest release.
    """
    entries = [
        PolicyEntry(SdkLevel.Q, "003"),
        PolicyEntry(SdkLevel.R, "004"),
        PolicyEntry(SdkLevel.S, "005"),
    ]
    entries.append(alias_entry(entries, SdkLevel.S_V2, same_as=SdkLevel.S))
    entries += [
        PolicyEntry(SdkLevel.TIRAMISU, "006"),
        PolicyEntry(SdkLevel.UPSIDE_DOWN_CAKE, "007"),
    ]
    entries += staging_entries(
        SdkLevel.VANILLA_ICE_CREAM,
        threshold=staging_threshold,
        current=staging_current,
        next_version=staging_next,
    )
    return SdkPolicyTable(entries)


DEFAULT_POLICY = build_default_policy()
