"""Error taxonomy for the tzdata compliance harness.

Every failure carries an error code, a human-readable message and the
offending values in ``details`` so a failing check can be told apart as
"the data module is wrong" or "the policy table needs a new release".
"""
from __future__ import annotations

from typing import Any


class TzComplianceError(Exception):
    """Base exception for all compliance errors.

    Attributes:
        code: Error code following the tzcompat:<area>/<kind> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class FormatError(TzComplianceError):
    """Raised when the version file does not match the fixed layout.

    A short read is never tolerated: fewer bytes than the field layout needs
    means a corrupted or foreign file.

    Attributes:
        reason: What was wrong with the file content
        path: The file that was read, when known
    """

    def __init__(
        self, reason: str, path: str | None = None, details: dict[str, Any] | None = None
    ) -> None:
        message = f"Malformed version file: {reason}"
        if path is not None:
            message = f"{message} (path: {path})"
        details_dict: dict[str, Any] = {"reason": reason}
        if path is not None:
            details_dict["path"] = path
        if details:
            details_dict.update(details)
        super().__init__(code="tzcompat:descriptor/format", message=message, details=details_dict)
        self.reason = reason
        self.path = path


class PolicyGapError(TzComplianceError):
    """Raised when the policy table has no entry for a platform release.

    This usually means a new release has been finalized and the table must be
    extended with an explicit entry for it.

    Attributes:
        release: The unmatched platform release (SDK level)
        build_signal: The secondary build signal supplied, if any
    """

    def __init__(
        self,
        release: int,
        build_signal: int | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = reason or f"No policy entry for platform release {release}"
        super().__init__(
            code="tzcompat:policy/gap",
            message=message,
            details={"release": release, "build_signal": build_signal, **(details or {})},
        )
        self.release = release
        self.build_signal = build_signal


class CompatibilityError(TzComplianceError):
    """Raised when the module's major format version disagrees with the policy.

    Attributes:
        release: Platform release under test
        expected: Major format version the policy table expects
        observed: Major format version read from the version file
        build_signal: Secondary build signal used for the lookup, if any
    """

    def __init__(
        self,
        release: int,
        expected: str,
        observed: str,
        build_signal: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = (
            f"Time zone module major format version '{observed}' is not compatible with "
            f"platform release {release} (expected '{expected}')"
        )
        super().__init__(
            code="tzcompat:check/compatibility",
            message=message,
            details={
                "release": release,
                "build_signal": build_signal,
                "expected": expected,
                "observed": observed,
                **(details or {}),
            },
        )
        self.release = release
        self.expected = expected
        self.observed = observed
        self.build_signal = build_signal


class InconsistencyError(TzComplianceError):
    """Raised when a reporting surface disagrees on the tzdb version.

    Attributes:
        source: Name of the surface that disagreed
        expected: tzdb version read from the version file
        reported: tzdb version reported by the surface
    """

    def __init__(
        self,
        source: str,
        expected: str,
        reported: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = (
            f"tzdb version reported by '{source}' is '{reported}', "
            f"but the time zone module has '{expected}'"
        )
        super().__init__(
            code="tzcompat:check/inconsistency",
            message=message,
            details={
                "source": source,
                "expected": expected,
                "reported": reported,
                **(details or {}),
            },
        )
        self.source = source
        self.expected = expected
        self.reported = reported


class VersionSourceError(TzComplianceError):
    """Raised when a reporting surface cannot produce a tzdb version at all."""

    def __init__(self, source: str, reason: str, details: dict[str, Any] | None = None) -> None:
        message = f"Version source '{source}' unavailable: {reason}"
        super().__init__(
            code="tzcompat:source/unavailable",
            message=message,
            details={"source": source, "reason": reason, **(details or {})},
        )
        self.source = source
        self.reason = reason
