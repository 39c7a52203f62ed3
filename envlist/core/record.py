"""Environment records and the built-in environment table"""

from dataclasses import dataclass
from typing import Dict

from ..utils.config import Config


class Mode:
    """Coarse runtime mode constants (secondary variable values)"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


@dataclass(frozen=True)
class EnvironmentRecord:
    """
    Pair of values for the two synchronized environment variables

    Attributes:
        primary_var: Logical environment name (e.g. "stage")
        secondary_var: Coarse runtime mode (e.g. "production")
    """
    primary_var: str
    secondary_var: str

    def to_dict(
        self,
        primary_name: str = None,
        secondary_name: str = None
    ) -> Dict[str, str]:
        """
        Map the record onto environment variable names

        Args:
            primary_name: Primary variable name (default: Config primary name)
            secondary_name: Secondary variable name (default: Config secondary name)

        Returns:
            Dict suitable for updating an environment mapping
        """
        return {
            primary_name or Config.get_primary_var_name(): self.primary_var,
            secondary_name or Config.get_secondary_var_name(): self.secondary_var,
        }


BUILTIN_ENVIRONMENTS: Dict[str, EnvironmentRecord] = {
    "dev": EnvironmentRecord("dev", Mode.DEVELOPMENT),
    "local": EnvironmentRecord("local", Mode.DEVELOPMENT),
    "prod": EnvironmentRecord("prod", Mode.PRODUCTION),
    "stage": EnvironmentRecord("stage", Mode.PRODUCTION),
    "test": EnvironmentRecord("test", Mode.TEST),
    "testProd": EnvironmentRecord("testProd", Mode.PRODUCTION),
    "testDev": EnvironmentRecord("testDev", Mode.DEVELOPMENT),
}
