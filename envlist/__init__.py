"""
envlist: Named deployment environments for APP_ENV / NODE_ENV

Maps environment names (dev, local, prod, stage, test, ...) to a pair of
values for two environment variables, detects the active environment from
the process environment and keeps both variables synchronized.

Basic Usage:
    # Resolve from APP_ENV (or NODE_ENV) and synchronize both variables
    >>> from envlist import EnvironmentRegistry
    >>> envs = EnvironmentRegistry().consolidate()
    >>> envs.is_("stage")
    True
    >>> envs.secondary_var
    'production'

    # Add a custom environment
    >>> envs.register("ci", "ci", "test")
"""

from .__version__ import __version__
from .core import EnvironmentRecord, EnvironmentRegistry, Mode, BUILTIN_ENVIRONMENTS
from .utils.exceptions import (
    EnvListError,
    InvalidArgumentError,
    EnvironmentNotFoundError,
    ReadOnlyError,
)

__all__ = [
    "__version__",
    "EnvironmentRecord",
    "EnvironmentRegistry",
    "Mode",
    "BUILTIN_ENVIRONMENTS",
    "EnvListError",
    "InvalidArgumentError",
    "EnvironmentNotFoundError",
    "ReadOnlyError",
]
