"""
Project Registry and Subproject Discovery

Builds the registry of projects taking part in a multi-project build:
the root project plus every subproject, found from app configuration,
settings.gradle(.kts) include statements, or the directory layout.
"""

import re
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .exceptions import OutputDirectoryCollisionException, ProjectDirectoryException
from .models import Project, ProjectRegistry

logger = logging.getLogger(__name__)

SETTINGS_FILES = ("settings.gradle.kts", "settings.gradle")
BUILD_FILES = ("build.gradle.kts", "build.gradle")
IGNORED_DIRECTORIES = {"build", "gradle", "buildSrc"}

# Either a parenthesised argument list (which may span lines) or the rest of the line
_INCLUDE_RE = re.compile(r'^\s*include\b\s*(\([^)]*\)|.*$)', re.MULTILINE)
_QUOTED_RE = re.compile(r'["\']([^"\']+)["\']')


def normalize_project_path(name: str) -> str:
    """Turn "app" or ":app" into ":app"."""
    name = name.strip()
    if name.startswith(':'):
        return name
    return f":{name}"


def read_settings_includes(root_dir: Path) -> Optional[List[str]]:
    """
    Read subproject paths from include(...) statements.

    Args:
        root_dir: Root directory of the build

    Returns:
        Included project paths in order, or None if there is no settings file
    """
    for filename in SETTINGS_FILES:
        settings_file = Path(root_dir) / filename
        if not settings_file.exists():
            continue

        try:
            content = settings_file.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ProjectDirectoryException(f"Could not read {settings_file}: {e}", path=str(root_dir)) from e

        includes = []
        for match in _INCLUDE_RE.finditer(content):
            includes.extend(_QUOTED_RE.findall(match.group(1)))
        logger.debug(f"Found includes {includes} in {settings_file}")
        return includes
    return None


def discover_subprojects(root_dir: Path) -> List[str]:
    """
    Find subprojects by scanning for directories that carry a build file.

    Args:
        root_dir: Root directory of the build

    Returns:
        Sorted project paths for each matching child directory
    """
    found = []
    for item in sorted(Path(root_dir).iterdir()):
        if (item.is_dir() and
                not item.name.startswith('.') and
                item.name not in IGNORED_DIRECTORIES and
                any((item / build_file).exists() for build_file in BUILD_FILES)):
            found.append(f":{item.name}")

    if found:
        logger.info(f"Auto-detected subprojects: {found}")
    return found


def _make_project(root_dir: Path, path: str) -> Project:
    segments = [segment for segment in path.split(':') if segment]
    if not segments:
        raise OutputDirectoryCollisionException(
            "subproject path has no name", project=path
        )
    name = segments[-1]
    if name in ('.', '..') or '/' in name or '\\' in name:
        raise OutputDirectoryCollisionException(
            f"name '{name}' would not be a child of the output root", project=path
        )
    return Project(name=name, path=path, directory=Path(root_dir).joinpath(*segments))


def build_registry(root_dir: Path, declared: Optional[Iterable[str]] = None) -> ProjectRegistry:
    """
    Build the project registry for a build.

    Args:
        root_dir: Root directory of the build
        declared: Explicit subproject list; when None, settings.gradle(.kts)
            includes are used, then the directory layout

    Returns:
        ProjectRegistry with subprojects in declaration order

    Raises:
        ProjectDirectoryException: If root_dir is not a directory or its settings
            file cannot be read
        OutputDirectoryCollisionException: If two subprojects share a name or a
            name cannot be used as a directory
    """
    root_dir = Path(root_dir)
    if not root_dir.is_dir():
        raise ProjectDirectoryException("build root is not an existing directory", path=str(root_dir))

    if declared is not None:
        paths = list(declared)
        source = "config/build.yaml"
    else:
        paths = read_settings_includes(root_dir)
        source = "settings file"
        if paths is None:
            paths = discover_subprojects(root_dir)
            source = "directory scan"

    subprojects = []
    seen = {}
    for raw in paths:
        path = normalize_project_path(raw)
        project = _make_project(root_dir, path)
        if project.path in seen:
            continue
        if project.name in seen.values():
            other = next(p for p, n in seen.items() if n == project.name)
            raise OutputDirectoryCollisionException(
                f"'{project.path}' and '{other}' would both write to <output_root>/{project.name}",
                project=project.path,
            )
        seen[project.path] = project.name
        subprojects.append(project)

    logger.debug(f"Registered {len(subprojects)} subprojects from {source}")
    root = Project(name=root_dir.name, path=":", directory=root_dir)
    return ProjectRegistry(root=root, subprojects=tuple(subprojects))
