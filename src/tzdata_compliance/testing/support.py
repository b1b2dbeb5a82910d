"""Helpers for staging test resources.

Every data resource is shipped next to a LICENSE file, and the license is
always staged with it.
"""

from __future__ import annotations

import shutil
import tempfile
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Union

TEST_DATA_RESOURCE_DIR = "data"
LICENSE_FILE_NAME = "LICENSE"

ResourceAnchor = Union[str, Traversable]


def _resource_root(anchor: ResourceAnchor) -> Traversable:
    if isinstance(anchor, str):
        return files(anchor)
    return anchor


def _copy_resource(resource: Traversable, target: Path) -> None:
    if not resource.is_file():
        raise FileNotFoundError(f"resource={resource} not found")
    with resource.open("rb") as src, open(target, "wb") as dst:
        shutil.copyfileobj(src, dst)


def copy_test_resource(anchor: ResourceAnchor, test_resource: str, target_dir: Path) -> Path:
    """Copy ``data/<test_resource>`` and its sibling LICENSE into ``target_dir``.

    Args:
        anchor: Package name or directory holding the ``data`` resource dir.
        test_resource: Resource path relative to ``data``, e.g. "tz_version".
        target_dir: Directory to copy into; created if missing.

    Returns:
        Path of the copied resource.

    Raises:
        FileNotFoundError: If the resource or its LICENSE is missing.
    """
    target_dir.mkdir(parents=True, exist_ok=True)

    resource_dir = _resource_root(anchor).joinpath(TEST_DATA_RESOURCE_DIR)
    *parents, file_name = test_resource.split("/")
    for part in parents:
        resource_dir = resource_dir.joinpath(part)

    target_file = target_dir / file_name
    _copy_resource(resource_dir.joinpath(file_name), target_file)
    _copy_resource(resource_dir.joinpath(LICENSE_FILE_NAME), target_dir / LICENSE_FILE_NAME)
    return target_file


def create_temp_dir(prefix: str) -> Path:
    return Path(tempfile.mkdtemp(prefix=prefix))


def delete_directory(path: Path) -> None:
    """Recursively delete ``path``; it must not exist afterwards."""
    shutil.rmtree(path)
    if path.exists():
        raise OSError(f"{path} still exists after delete")
