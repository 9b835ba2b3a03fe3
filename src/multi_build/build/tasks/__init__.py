"""
multi-build tasks package.

Modules are imported by the top-level multi_build package and collected
with Collection.from_module().
"""

import logging

from ..config.logging import bootstrap_logging, enable_debug_logging


def setup_logging(debug=False):
    """Set up logging for a task run based on the --debug flag."""
    bootstrap_logging(__name__)
    if debug:
        enable_debug_logging()
        logging.getLogger(__name__).debug("Debug logging enabled")
