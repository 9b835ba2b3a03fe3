"""
Command line entry point for multi-build.

Exposes the task namespace as a standalone `multi-build` program, so
`multi-build clean` works without a tasks.py in the build directory.
Projects that already use invoke can instead import the namespace:

    from multi_build import namespace
"""

from invoke import Program

from multi_build import namespace

__version__ = '0.1.0'

program = Program(namespace=namespace, name='multi-build', binary='multi-build', version=__version__)
