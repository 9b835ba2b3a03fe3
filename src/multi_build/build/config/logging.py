"""
Centralized logging configuration.

Provides bootstrap_logging(), which every entry point calls to configure
logging from a logging.ini file using Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
PACKAGE_LOGGING_CONFIG = Path(__file__).parent / 'logging.ini'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then falls
    back to the copy shipped with the package.
    """
    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config

    if PACKAGE_LOGGING_CONFIG.exists():
        return PACKAGE_LOGGING_CONFIG

    return None


def _resolve_log_level() -> str:
    """Read LOG_LEVEL, defaulting to WARNING and rejecting unknown values."""
    log_level = os.environ.get('LOG_LEVEL', 'WARNING').strip().upper()
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using WARNING", file=sys.stderr)
        log_level = 'WARNING'
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration from logging.ini.

    The LOG_LEVEL environment variable is substituted into the INI file
    as %(LOG_LEVEL)s. Without a usable INI file, basicConfig is used.

    Args:
        name: Optional logger name to report the configuration on
    """
    log_level = _resolve_log_level()
    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            defaults={'LOG_LEVEL': log_level},
            disable_existing_loggers=False
        )
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        logging.basicConfig(
            level=getattr(logging, log_level),
            format='%(levelname)s: %(name)s: %(message)s',
            stream=sys.stderr
        )
        return

    logging.getLogger(name).debug(f"Logging configured from {config_path}")


def enable_debug_logging() -> None:
    """Switch the multi_build loggers and their handlers to DEBUG."""
    package_logger = logging.getLogger('multi_build')
    package_logger.setLevel(logging.DEBUG)
    for handler in package_logger.handlers:
        handler.setLevel(logging.DEBUG)
