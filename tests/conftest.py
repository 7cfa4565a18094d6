"""
Shared pytest fixtures for custom-semver tests.

Provides the ordered reference sequence and isolation for the
configuration singleton and package logger.
"""

import logging
import sys
from pathlib import Path
import pytest
from typing import List

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Version Fixtures
# ============================================================================

ORDERED_VERSIONS = [
    "0.0.0-alpha.1",
    "0.0.0",
    "1.0.0-alpha.1",
    "1.0.0-alpha.2",
    "1.0.0",
    "1.0.0+hotfix.1",
    "1.0.0+hotfix.2",
    "1.0.0+hotfix.10",
    "1.0.0+patch.1",
    "1.0.0+patch.1.1",
    "1.0.0+patch.1.2",
    "1.0.0+patch.2",
    "1.0.0+patch.2.1",
    "1.0.0+patch.10",
    "1.0.0+patch.10.1",
    "1.0.1",
    "1.1.0",
    "2.0.0",
    "2.0.0+hotfix.1",
    "2.0.0+patch.1",
]


@pytest.fixture
def ordered_versions() -> List[str]:
    """Versions in strictly ascending order."""
    return list(ORDERED_VERSIONS)


@pytest.fixture
def consistent_versions() -> List[str]:
    """
    Valid versions covering every comparison branch that stay transitive.

    Includes tags that contain an identifier without leading with it,
    non-numeric counters, padded counters and plain build metadata.
    """
    return ORDERED_VERSIONS + [
        "1.0.0+build.1",
        "1.0.0+PATCH.1",
        "1.0.0+contains.patch.1",
        "1.0.0+contains.patch.2",
        "1.0.0+patch.something",
        "1.0.0+patch.1.0.0",
        "1.0.0-rc.1+patch.3",
    ]


@pytest.fixture
def edge_versions(consistent_versions) -> List[str]:
    """Adds tags whose ordering falls through to plain string comparison."""
    return consistent_versions + [
        "1.0.0+other",
        "1.0.0+dispatcher.1",
        "1.0.0+foo.hotfix.1",
    ]


# ============================================================================
# Isolation Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_config_manager():
    """Reset the ConfigManager singleton between tests."""
    from custom_semver.config import ConfigManager
    ConfigManager._instance = None
    yield
    ConfigManager._instance = None


@pytest.fixture
def package_logger():
    """Package logger, restored to its original level after the test."""
    logger = logging.getLogger("custom-semver")
    level = logger.level
    yield logger
    logger.setLevel(level)
