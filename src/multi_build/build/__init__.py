"""
Build package for multi-build.

This package contains the build configuration loader and its tasks.
"""

from .config import load_build_config, BuildConfiguration, BuildSettings

__all__ = [
    'load_build_config',
    'BuildConfiguration',
    'BuildSettings'
]
