"""
Utils Module
Logging and the semver engine adapter.
"""

from .logger import Logger

__all__ = ["Logger"]
