"""
custom-semver
Semantic version ordering with patch/hotfix build-tag revisions.
"""

from typing import Optional

__version__ = "1.0.0"
__package_name__ = "custom-semver"

from custom_semver.comparator import (  # noqa: E402
    PATCH_IDENTIFIERS,
    compare,
    custom_semver_compare,
    gt,
    lt,
    eq,
    gte,
    lte,
    valid,
    sort,
    rsort,
    sort_key,
)
from custom_semver.config import Config, ConfigManager  # noqa: E402
from custom_semver.utils import Logger  # noqa: E402
from custom_semver.utils.semver import MalformedVersion  # noqa: E402


def configure(config: Optional[Config] = None) -> Config:
    """
    Apply configuration to the package logger.

    Loads from the environment when no config is given.
    """
    if config is None:
        config = ConfigManager.get_instance().load()
    Logger(__package_name__).set_level(config.log_level)
    return config


__all__ = [
    "__version__",
    "PATCH_IDENTIFIERS",
    "MalformedVersion",
    "compare",
    "custom_semver_compare",
    "gt",
    "lt",
    "eq",
    "gte",
    "lte",
    "valid",
    "sort",
    "rsort",
    "sort_key",
    "configure",
]
