"""
Configuration management for multi-build.
"""

from .exceptions import (
    BuildConfigException,
    BuildConfigFileException,
    ProjectDirectoryException,
    MalformedRepositoryUriException,
    PrimaryProjectNotFoundException,
    OutputDirectoryCollisionException,
    EvaluationOrderException,
    CleanPermissionException
)
from .models import (
    Repository,
    RepositoryKind,
    RepositoryList,
    Project,
    ProjectRegistry,
    DirectoryMapping,
    EvaluationOrderConstraint,
    TaskRegistration,
    BuildConfiguration
)
from .settings import BuildSettings
from .repositories import load_repositories
from .layout import relocate_output_directory, resolve_output_root
from .evaluation import constrain_evaluation_order, evaluation_order, EvaluationTracker
from .loading import load_build_config, register_clean_task


__all__ = [
    'BuildConfigException',
    'BuildConfigFileException',
    'ProjectDirectoryException',
    'MalformedRepositoryUriException',
    'PrimaryProjectNotFoundException',
    'OutputDirectoryCollisionException',
    'EvaluationOrderException',
    'CleanPermissionException',
    'Repository',
    'RepositoryKind',
    'RepositoryList',
    'Project',
    'ProjectRegistry',
    'DirectoryMapping',
    'EvaluationOrderConstraint',
    'TaskRegistration',
    'BuildConfiguration',
    'BuildSettings',
    'load_repositories',
    'relocate_output_directory',
    'resolve_output_root',
    'constrain_evaluation_order',
    'evaluation_order',
    'EvaluationTracker',
    'load_build_config',
    'register_clean_task'
]
