"""Testing utilities for the tzdata compliance harness.

Modules:
    support: Resource staging and directory cleanup helpers.
    fixtures: Pytest fixtures (version_file_factory, staged_version_file).

Example:
    >>> from tzdata_compliance.testing import copy_test_resource, delete_directory
"""

from tzdata_compliance.testing.support import (
    LICENSE_FILE_NAME,
    TEST_DATA_RESOURCE_DIR,
    copy_test_resource,
    create_temp_dir,
    delete_directory,
)

__all__ = [
    "LICENSE_FILE_NAME",
    "TEST_DATA_RESOURCE_DIR",
    "copy_test_resource",
    "create_temp_dir",
    "delete_directory",
]
