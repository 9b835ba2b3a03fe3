"""
Output directory relocation.
"""

import os
import logging
from pathlib import Path
from typing import Union

from .exceptions import OutputDirectoryCollisionException
from .models import DirectoryMapping, ProjectRegistry

logger = logging.getLogger(__name__)

DEFAULT_BUILD_DIR_NAME = "build"


def default_output_directory(root_dir: Path) -> Path:
    """The output directory a build uses when nothing relocates it."""
    return Path(root_dir) / DEFAULT_BUILD_DIR_NAME


def resolve_output_root(root_dir: Path, output_root: Union[str, Path]) -> Path:
    """
    Resolve the relocated output root.

    Relative values resolve against the root project's default output
    directory, so "../../build" from <root_dir>/build is <root_dir>/../build.

    Args:
        root_dir: Root directory of the build
        output_root: Configured output root, absolute or relative

    Returns:
        Normalized absolute path
    """
    candidate = Path(output_root)
    if not candidate.is_absolute():
        candidate = default_output_directory(Path(root_dir).resolve()) / candidate
    return Path(os.path.normpath(candidate))


def relocate_output_directory(registry: ProjectRegistry, new_root: Path) -> DirectoryMapping:
    """
    Point the root project at new_root and every subproject at new_root/<name>.

    Args:
        registry: Projects taking part in the build
        new_root: Relocated output root, already resolved

    Returns:
        DirectoryMapping for the root and each subproject path

    Raises:
        OutputDirectoryCollisionException: If two subprojects map to one directory
    """
    new_root = Path(new_root)
    subprojects = {}
    claimed = {}
    for project in registry.subprojects:
        output_dir = new_root / project.name
        if output_dir in claimed:
            raise OutputDirectoryCollisionException(
                f"output directory already used by '{claimed[output_dir]}'",
                project=project.path, path=str(output_dir),
            )
        claimed[output_dir] = project.path
        subprojects[project.path] = output_dir
        logger.debug(f"{project.path} -> {output_dir}")

    logger.info(f"Relocated build output for {registry.root.name} to {new_root}")
    return DirectoryMapping(root=new_root, subprojects=subprojects)
