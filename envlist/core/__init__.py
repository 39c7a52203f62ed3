"""Core environment registry components"""

from .record import EnvironmentRecord, Mode, BUILTIN_ENVIRONMENTS
from .registry import EnvironmentRegistry

__all__ = [
    "EnvironmentRecord",
    "Mode",
    "BUILTIN_ENVIRONMENTS",
    "EnvironmentRegistry",
]
