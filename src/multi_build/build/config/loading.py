"""
Build configuration loading.

load_build_config() runs the loader's operations once, in a fixed order:

1. load the repository list
2. relocate the output directory of the root project and every subproject
3. make every subproject evaluate after the primary project
4. register the clean task

The resulting BuildConfiguration is passed explicitly to whoever needs it;
nothing is kept in module state.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from invoke import Collection

from .evaluation import constrain_evaluation_order
from .layout import relocate_output_directory, resolve_output_root
from .models import BuildConfiguration, DirectoryMapping, TaskRegistration
from .projects import build_registry
from .repositories import load_repositories
from .settings import BuildSettings

logger = logging.getLogger(__name__)

CLEAN_TASK_NAME = "clean"


def register_clean_task(directories: DirectoryMapping,
                        namespace: Optional[Collection] = None) -> TaskRegistration:
    """
    Register the task that deletes the relocated root output directory.

    Args:
        directories: Output directories produced by relocation
        namespace: Invoke collection to add the task to, if any

    Returns:
        TaskRegistration describing what the task deletes
    """
    if namespace is not None:
        from ..tasks.clean import add_clean_task
        add_clean_task(namespace)

    return TaskRegistration(
        name=CLEAN_TASK_NAME,
        description="Delete the build output directory",
        target=directories.root,
    )


def load_build_config(project_dir: Optional[Union[str, Path]] = None,
                      settings: Optional[BuildSettings] = None,
                      namespace: Optional[Collection] = None) -> BuildConfiguration:
    """
    Load the configuration of a multi-project build.

    Args:
        project_dir: Root directory of the build (defaults to the current directory)
        settings: Settings to use instead of loading them from YAML
        namespace: Invoke collection the clean task is registered in

    Returns:
        Immutable BuildConfiguration

    Raises:
        MalformedRepositoryUriException: A repository URI literal is malformed
        ProjectDirectoryException: project_dir is missing or its settings file is unreadable
        PrimaryProjectNotFoundException: The primary project does not exist
        OutputDirectoryCollisionException: Two subprojects share an output directory
        BuildConfigFileException: A settings file is unreadable or invalid
    """
    root_dir = Path(project_dir or Path.cwd()).resolve()
    if settings is None:
        settings = BuildSettings.load(root_dir)

    registry = build_registry(root_dir, settings.projects)

    repositories = load_repositories()
    directories = relocate_output_directory(registry, resolve_output_root(root_dir, settings.output_root))
    evaluation = constrain_evaluation_order(registry, settings.primary_project)
    clean = register_clean_task(directories, namespace=namespace)

    logger.info(
        f"Loaded build configuration for {root_dir}: {len(registry.subprojects)} subprojects, "
        f"{len(repositories)} repositories, output in {directories.root}"
    )
    return BuildConfiguration(
        registry=registry,
        repositories=repositories,
        directories=directories,
        evaluation=evaluation,
        tasks=(clean,),
    )
