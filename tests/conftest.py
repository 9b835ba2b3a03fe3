"""
Root pytest configuration for multi-build.
"""

from multi_build.build.config.logging import bootstrap_logging


def pytest_configure(config):
    """Bootstrap logging once for the whole test session."""
    bootstrap_logging()
