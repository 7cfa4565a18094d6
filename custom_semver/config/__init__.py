"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, get_log_level

__all__ = [
    "ConfigManager",
    "Config",
    "get_log_level",
]
