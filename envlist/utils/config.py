"""Global configuration with environment variable overrides"""

import os


class Config:
    """Global configuration with sensible defaults"""
    
    # Names of the two synchronized environment variables
    PRIMARY_VAR_NAME: str = "APP_ENV"
    SECONDARY_VAR_NAME: str = "NODE_ENV"
    
    # Logging
    LOG_LEVEL: str = "WARNING"
    
    @classmethod
    def get_primary_var_name(cls) -> str:
        """Get primary variable name from env or default"""
        return os.getenv("ENVLIST_PRIMARY_VAR") or cls.PRIMARY_VAR_NAME
    
    @classmethod
    def get_secondary_var_name(cls) -> str:
        """Get secondary variable name from env or default"""
        return os.getenv("ENVLIST_SECONDARY_VAR") or cls.SECONDARY_VAR_NAME
    
    @classmethod
    def get_log_level(cls) -> str:
        """Get log level from env or default"""
        return os.getenv("ENVLIST_LOG_LEVEL", cls.LOG_LEVEL).upper()
