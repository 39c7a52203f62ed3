"""Environment registry - resolves and synchronizes the current environment"""

import os
from typing import Dict, MutableMapping, Optional

from .record import BUILTIN_ENVIRONMENTS, EnvironmentRecord
from ..utils.config import Config
from ..utils.exceptions import (
    EnvironmentNotFoundError,
    InvalidArgumentError,
    ReadOnlyError,
)
from ..utils.logger import logger


class EnvironmentRegistry:
    """
    Registry of named environments

    Maps environment names to EnvironmentRecord pairs, resolves the current
    environment from the process environment and writes both variables back
    so they agree with each other.

    Usage:
        >>> registry = EnvironmentRegistry().consolidate()
        >>> registry.is_("prod")
        False
        >>> registry.secondary_var
        'development'
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        primary_name: Optional[str] = None,
        secondary_name: Optional[str] = None
    ):
        """
        Initialize registry with the built-in environments

        Args:
            environ: Environment mapping to read and write (default: os.environ)
            primary_name: Primary variable name (default: APP_ENV)
            secondary_name: Secondary variable name (default: NODE_ENV)
        """
        self.environ = environ if environ is not None else os.environ
        self.primary_name = primary_name or Config.get_primary_var_name()
        self.secondary_name = secondary_name or Config.get_secondary_var_name()

        self.table: Dict[str, EnvironmentRecord] = dict(BUILTIN_ENVIRONMENTS)
        self.current: Optional[str] = None

    def has(self, name) -> bool:
        """Check if an environment is defined"""
        try:
            return name in self.table
        except TypeError:
            # Unhashable names are never keys
            return False

    def __contains__(self, name) -> bool:
        return self.has(name)

    def get(self, name: str) -> EnvironmentRecord:
        """
        Get the record of a given environment

        Args:
            name: Environment name (e.g. prod, dev, local)

        Returns:
            EnvironmentRecord

        Raises:
            InvalidArgumentError: If name is empty or None
            EnvironmentNotFoundError: If the environment is not defined
        """
        if not name:
            logger.debug("Environment lookup without a name")
            raise InvalidArgumentError("An environment name is required")

        if self.has(name):
            return self.table[name]

        logger.debug(f"Environment not found: {name!r}")
        raise EnvironmentNotFoundError("Environment not found.")

    def register(
        self,
        name: str,
        primary_var: str,
        secondary_var: str
    ) -> EnvironmentRecord:
        """
        Add or replace an environment

        Args:
            name: Environment name
            primary_var: Value for the primary variable
            secondary_var: Value for the secondary variable

        Returns:
            The stored EnvironmentRecord
        """
        if not name:
            raise InvalidArgumentError("An environment name is required")

        record = EnvironmentRecord(primary_var, secondary_var)
        if name in self.table:
            logger.debug(f"Overwriting environment {name!r}")
        self.table[name] = record
        return record

    def resolve_current(self) -> "EnvironmentRegistry":
        """
        Resolve the current environment from the process environment

        The primary variable wins when it is non-empty, otherwise the
        secondary variable is used. The name is stored before it is
        checked, so a failed resolution leaves it in `current`.

        Returns:
            self

        Raises:
            EnvironmentNotFoundError: If the resolved name is empty or unknown
        """
        self.current = (
            self.environ.get(self.primary_name)
            or self.environ.get(self.secondary_name)
        )

        if self.current and self.has(self.current):
            logger.info(f"Resolved current environment: {self.current}")
            return self

        logger.debug(
            f"Cannot resolve environment from {self.primary_name}/"
            f"{self.secondary_name}: {self.current!r}"
        )
        raise EnvironmentNotFoundError("Environment not found.")

    def consolidate(self) -> "EnvironmentRegistry":
        """
        Write both variables from the current environment record

        Resolves the current environment first if needed.

        Returns:
            self
        """
        if not self.current:
            self.resolve_current()

        record = self.get(self.current)
        self.environ.update(record.to_dict(self.primary_name, self.secondary_name))

        logger.info(
            f"Consolidated {self.primary_name}={record.primary_var}, "
            f"{self.secondary_name}={record.secondary_var}"
        )
        return self

    def is_(self, name: str) -> bool:
        """Check if the current environment is `name`"""
        return self.current == name

    def get_current(self) -> EnvironmentRecord:
        """
        Get the record of the current environment

        Raises:
            InvalidArgumentError: If no current environment is set
            EnvironmentNotFoundError: If the current environment is not defined
        """
        return self.get(self.current)

    @property
    def primary_var(self) -> str:
        """Primary variable value of the current environment"""
        return self.get_current().primary_var

    @primary_var.setter
    def primary_var(self, value):
        raise ReadOnlyError("EnvironmentRegistry.primary_var is read-only.")

    @property
    def secondary_var(self) -> str:
        """Secondary variable value of the current environment"""
        return self.get_current().secondary_var

    @secondary_var.setter
    def secondary_var(self, value):
        raise ReadOnlyError("EnvironmentRegistry.secondary_var is read-only.")

    # Aliases using the conventional variable names

    @property
    def APP_ENV(self) -> str:
        return self.primary_var

    @APP_ENV.setter
    def APP_ENV(self, value):
        raise ReadOnlyError("EnvironmentRegistry.APP_ENV is read-only.")

    @property
    def NODE_ENV(self) -> str:
        return self.secondary_var

    @NODE_ENV.setter
    def NODE_ENV(self, value):
        raise ReadOnlyError("EnvironmentRegistry.NODE_ENV is read-only.")

    @property
    def envs(self) -> Dict[str, EnvironmentRecord]:
        return self.table

    @property
    def env(self) -> Optional[str]:
        return self.current

    def __repr__(self) -> str:
        return (
            f"EnvironmentRegistry(current={self.current!r}, "
            f"environments={sorted(self.table)})"
        )
