"""Clean task for multi-project builds.

Deletes the relocated root output directory, which holds the output of
the root project and of every subproject. Running it on an already clean
tree is a no-op.
"""

import shutil
import logging
from pathlib import Path
from invoke import Collection, task

from multi_build.build.config.exceptions import CleanPermissionException
from multi_build.build.config.loading import CLEAN_TASK_NAME, load_build_config
from multi_build.build.config.models import CleanResult
from .decorators import reports_config_errors
from . import setup_logging

logger = logging.getLogger(__name__)


def clean_output_directory(path: Path) -> CleanResult:
    """
    Delete a build output directory recursively.

    Args:
        path: Directory to delete

    Returns:
        CleanResult with code CLEAN_REMOVED, or CLEAN_NO_OP when nothing existed

    Raises:
        CleanPermissionException: If the filesystem refuses the deletion
    """
    path = Path(path)
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.exists():
            shutil.rmtree(path)
        else:
            logger.debug(f"Nothing to clean at {path}")
            return CleanResult(code="CLEAN_NO_OP", path=str(path), removed=False)
    except FileNotFoundError:
        logger.debug(f"{path} disappeared before it could be deleted")
        return CleanResult(code="CLEAN_NO_OP", path=str(path), removed=False)
    except PermissionError as e:
        raise CleanPermissionException(str(e), path=str(path)) from e

    logger.info(f"Deleted build output at {path}")
    return CleanResult(code="CLEAN_REMOVED", path=str(path), removed=True)


@task(help={
    'project_dir': 'Root directory of the native build (default: current directory)',
    'debug': 'Enable debug logging'
})
@reports_config_errors
def clean(ctx, project_dir=None, debug=False):
    """
    Delete the build output directory of the root project and all subprojects.

    Exits non-zero when the filesystem refuses the deletion or the build
    configuration cannot be loaded.
    """
    setup_logging(debug)

    config = load_build_config(project_dir)
    result = clean_output_directory(config.directories.root)

    if result.removed:
        print(f"✅ Deleted {result.path}")
    else:
        print(f"✅ Nothing to clean at {result.path}")
    return result


def add_clean_task(namespace: Collection) -> Collection:
    """Add the clean task to an invoke collection."""
    namespace.add_task(clean, name=CLEAN_TASK_NAME)
    return namespace
