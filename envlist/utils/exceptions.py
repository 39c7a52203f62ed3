"""Custom exceptions for envlist"""


class EnvListError(Exception):
    """Base exception for all envlist errors"""
    pass


class InvalidArgumentError(EnvListError, ValueError):
    """Required environment name is empty or missing"""
    pass


class EnvironmentNotFoundError(EnvListError, LookupError):
    """Environment name is not defined in the registry"""
    pass


class ReadOnlyError(EnvListError, AttributeError):
    """Attempted to assign a read-only attribute"""
    pass
