"""Compliance validators."""

from __future__ import annotations

from tzdata_compliance.validators.compatibility import (
    CheckResult,
    CompatibilityResult,
    check_compatibility,
    validate_compatibility,
)
from tzdata_compliance.validators.consistency import (
    ConsistencyResult,
    check_consistency,
    validate_consistency,
)

__all__ = [
    "CheckResult",
    "CompatibilityResult",
    "ConsistencyResult",
    "check_compatibility",
    "check_consistency",
    "validate_compatibility",
    "validate_consistency",
]
