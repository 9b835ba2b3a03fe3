"""
Build settings: SDK defaults merged with application overrides.

Layers, lowest to highest priority:
1. build.yaml shipped next to this module
2. <project-dir>/config/build.yaml (optional)
3. MULTI_BUILD_OUTPUT_ROOT environment variable (output_root only)
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import BuildConfigFileException

logger = logging.getLogger(__name__)

SDK_SETTINGS_FILE = Path(__file__).parent / "build.yaml"
APP_SETTINGS_FILE = Path("config") / "build.yaml"
OUTPUT_ROOT_ENV_VAR = "MULTI_BUILD_OUTPUT_ROOT"


class BuildSettings(BaseModel):
    """Settings consumed by the configuration loader."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    output_root: str = "../../build"
    primary_project: str = ":app"
    projects: Optional[List[str]] = None  # None means discover from settings.gradle

    @classmethod
    def load(cls, project_dir: Path) -> 'BuildSettings':
        """
        Load settings for a build rooted at project_dir.

        Args:
            project_dir: Root directory of the native build

        Returns:
            Merged, validated settings

        Raises:
            BuildConfigFileException: If a settings file is unreadable or invalid
        """
        merged = _read_yaml(SDK_SETTINGS_FILE, required=True)

        app_file = Path(project_dir) / APP_SETTINGS_FILE
        app_settings = _read_yaml(app_file, required=False)
        if app_settings:
            logger.debug(f"Applying app overrides from {app_file}: {sorted(app_settings)}")
            merged.update(app_settings)

        env_output_root = os.environ.get(OUTPUT_ROOT_ENV_VAR)
        if env_output_root and env_output_root.strip():
            logger.debug(f"{OUTPUT_ROOT_ENV_VAR} overrides output_root: {env_output_root}")
            merged['output_root'] = env_output_root.strip()

        try:
            settings = cls(**merged)
        except ValidationError as e:
            source = app_file if app_settings else SDK_SETTINGS_FILE
            raise BuildConfigFileException(f"Invalid settings: {e}", path=str(source)) from e

        logger.info(f"Loaded build settings for {project_dir}")
        return settings


def _read_yaml(path: Path, required: bool) -> Dict[str, Any]:
    """Read a YAML mapping, returning {} for a missing optional file."""
    if not path.exists():
        if required:
            raise BuildConfigFileException(f"Required settings file not found: {path}", path=str(path))
        return {}

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise BuildConfigFileException(f"Could not parse {path}: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BuildConfigFileException(f"Expected a mapping at the top of {path}", path=str(path))
    return data
