"""
Configuration Display Tasks

Show the loaded build configuration with diagnostic information.
Parseable output goes to stdout, diagnostics to stderr.
"""

import sys
import yaml
import logging
from invoke import task

from multi_build.build.config.evaluation import evaluation_order
from multi_build.build.config.loading import load_build_config
from .decorators import reports_config_errors
from . import setup_logging

logger = logging.getLogger(__name__)

PROJECT_DIR_HELP = 'Root directory of the native build (default: current directory)'


@task(help={'project_dir': PROJECT_DIR_HELP, 'debug': 'Enable debug logging'})
@reports_config_errors
def show_config(ctx, project_dir=None, debug=False):
    """
    Show the loaded build configuration.

    Outputs:
        stdout: YAML configuration (parseable)
        stderr: Diagnostic information
    """
    setup_logging(debug)

    print(f"🔍 Loading build configuration from: {project_dir or '.'}", file=sys.stderr)
    config = load_build_config(project_dir)

    print("✅ Configuration loaded successfully", file=sys.stderr)
    print(f"📦 Repositories: {len(config.repositories)}", file=sys.stderr)
    print(f"🧩 Subprojects: {', '.join(config.registry.paths()) or 'none'}", file=sys.stderr)
    print(f"⭐ Primary project: {config.evaluation.primary}", file=sys.stderr)
    print(f"📁 Output root: {config.directories.root}", file=sys.stderr)

    yaml.dump(config.model_dump(mode='json'), sys.stdout, default_flow_style=False, sort_keys=False)


@task(help={'project_dir': PROJECT_DIR_HELP})
@reports_config_errors
def list_repositories(ctx, project_dir=None):
    """
    List package repositories in resolution order, one URI per line.
    """
    setup_logging()
    config = load_build_config(project_dir)
    for uri in config.repositories.uris():
        print(uri)


@task(name='evaluation-order', help={'project_dir': PROJECT_DIR_HELP})
@reports_config_errors
def show_evaluation_order(ctx, project_dir=None):
    """
    Print project paths in an order that satisfies the evaluation constraint.
    """
    setup_logging()
    config = load_build_config(project_dir)
    for path in evaluation_order(config.registry, config.evaluation):
        print(path)
