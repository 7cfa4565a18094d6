"""Semantic versioning engine.

Thin adapter over the ``semver`` distribution. Provides standard
precedence comparison (build metadata ignored), a non-raising parse and
a normalizing validity check.
"""

import logging
from typing import Optional

import semver

from custom_semver.utils.logger import Logger

logger = Logger("custom-semver")


class MalformedVersion(ValueError):
    """Raised when a string does not conform to semantic-version syntax."""

    def __init__(self, version):
        super().__init__(f"Invalid semver: {version}")
        self.version = version


def _clean(version: str) -> str:
    # Surrounding whitespace and a single leading "v" are tolerated
    version = version.strip()
    if version[:1] == "v":
        version = version[1:]
    return version


def parse_strict(version: str) -> semver.Version:
    """Parse a version string, raising MalformedVersion on bad input."""
    if not isinstance(version, str):
        raise MalformedVersion(version)
    try:
        return semver.Version.parse(_clean(version))
    except (ValueError, TypeError) as e:
        raise MalformedVersion(version) from e


def parse(version: str) -> Optional[semver.Version]:
    """Parse a version string, returning None instead of raising."""
    try:
        return parse_strict(version)
    except MalformedVersion:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Rejected version string: {version!r}")
        return None


def standard_compare(version1: str, version2: str) -> int:
    """
    Compare two versions by standard semver precedence.

    Numeric core first, then prerelease identifiers. Build metadata is
    ignored, so ``1.0.0+a`` and ``1.0.0+b`` compare equal.

    Raises:
        MalformedVersion: if either string is not a valid version.
    """
    v1 = parse_strict(version1)
    v2 = parse_strict(version2)
    return v1.compare(v2)


def build_identifiers(parsed: semver.Version) -> list:
    """Return the dot-separated build metadata identifiers (may be empty)."""
    if not parsed.build:
        return []
    return parsed.build.split(".")


def validate(version: str) -> Optional[str]:
    """
    Return the normalized ``major.minor.patch[-prerelease]`` form.

    Build metadata is stripped. Returns None when the input is not a
    valid semantic version.
    """
    parsed = parse(version)
    if parsed is None:
        return None
    normalized = f"{parsed.major}.{parsed.minor}.{parsed.patch}"
    if parsed.prerelease:
        normalized += f"-{parsed.prerelease}"
    return normalized
