"""
Task decorators for build configuration errors.
"""
import functools
import sys

from multi_build.build.config.exceptions import BuildConfigException


def reports_config_errors(func):
    """Decorator that turns BuildConfigException into guidance on stderr and exit 1.

    Other exceptions bubble up unchanged.
    """
    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        try:
            return func(ctx, *args, **kwargs)
        except BuildConfigException as e:
            print(e.guidance, file=sys.stderr)
            sys.exit(1)
    return wrapper
