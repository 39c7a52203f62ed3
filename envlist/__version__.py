"""Version information for envlist"""

__version__ = "0.1.0"
