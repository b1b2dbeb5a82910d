"""Shared pytest fixtures for tzdata compliance tests."""

from __future__ import annotations

import pytest

from tzdata_compliance.models import PlatformRelease
from tzdata_compliance.policy import SdkLevel

pytest_plugins = [
    "pytester",
    "tzdata_compliance.pytest_plugin",
    "tzdata_compliance.testing.fixtures",
]


@pytest.fixture
def upside_down_cake() -> PlatformRelease:
    """Release whose policy entry expects major format version 007."""
    return PlatformRelease(sdk_int=SdkLevel.UPSIDE_DOWN_CAKE)


@pytest.fixture
def tiramisu() -> PlatformRelease:
    """Release whose policy entry expects major format version 006."""
    return PlatformRelease(sdk_int=SdkLevel.TIRAMISU)
