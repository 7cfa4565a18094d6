"""
Version comparator.

Orders version strings by standard semver precedence and, when that
reports a tie, by patch/hotfix revision counters carried in the build
metadata:

    1.0.0 < 1.0.0+hotfix.1 < 1.0.0+hotfix.10 < 1.0.0+patch.1 < 1.0.0+patch.1.1 < 1.0.1

Build metadata without a recognized identifier never affects ordering,
so ``1.0.0+build.1`` still equals ``1.0.0``.
"""

import logging
import re
from functools import cmp_to_key
from typing import Iterable, List, Optional

from custom_semver.utils import semver
from custom_semver.utils.logger import Logger

logger = Logger("custom-semver")

# Recognized build-tag identifiers. Matching is case-sensitive and
# token-exact.
PATCH_IDENTIFIERS = ("patch", "hotfix")


def _boundary_pattern(identifier: str):
    return re.compile(rf"(?:^|\.){re.escape(identifier)}(?:\.|$)")


_BOUNDARY_PATTERNS = {
    identifier: _boundary_pattern(identifier) for identifier in PATCH_IDENTIFIERS
}

_LEADING_PATTERNS = tuple(
    (identifier, re.compile(rf"^{re.escape(identifier)}\.(\d+(?:\.\d+)*)$"))
    for identifier in PATCH_IDENTIFIERS
)

# Revision counters are padded to this many segments before comparison
_REVISION_WIDTH = 3


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def has_identifier(build_tag: str, identifier: str) -> bool:
    """
    Check whether ``identifier`` appears in ``build_tag`` as a whole token.

    Only ``.`` and the ends of the string count as token boundaries, so
    ``dispatcher``, ``patchwork`` and ``pre-patch`` never match ``patch``.
    """
    pattern = _BOUNDARY_PATTERNS.get(identifier) or _boundary_pattern(identifier)
    return pattern.search(build_tag) is not None


def has_patch_identifier(build_tag: str) -> bool:
    """True if any recognized identifier appears token-delimited in the tag."""
    return any(pattern.search(build_tag) for pattern in _BOUNDARY_PATTERNS.values())


def leading_identifier(build_tag: str) -> Optional[str]:
    """
    Return the identifier a build tag starts with, or None.

    The tag must be ``<identifier>.<n>[.<n>...]`` with purely numeric
    revision segments, e.g. ``patch.10.1``.
    """
    return _match_leading(build_tag)[0]


def _match_leading(build_tag: str):
    for identifier, pattern in _LEADING_PATTERNS:
        match = pattern.match(build_tag)
        if match:
            return identifier, match.group(1)
    return None, None


def _revision(counter: str) -> tuple:
    parts = counter.split(".")
    while len(parts) < _REVISION_WIDTH:
        parts.append("0")
    return tuple(int(part) for part in parts)


def _compare_revisions(counter1: str, counter2: str) -> int:
    rev1 = _revision(counter1)
    rev2 = _revision(counter2)
    # Missing trailing segments beyond the padded width count as zero
    width = max(len(rev1), len(rev2))
    rev1 += (0,) * (width - len(rev1))
    rev2 += (0,) * (width - len(rev2))
    return _cmp(rev1, rev2)


def _resolved(result: int, step: str, version1: str, version2: str) -> int:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"compare({version1!r}, {version2!r}) = {result} [{step}]")
    return result


def compare(version1: str, version2: str) -> int:
    """
    Compare two version strings.

    Standard semver precedence is decisive whenever it is non-zero. On a
    tie, build tags carrying a recognized identifier are ordered:

    - a tagged version is greater than one with no build metadata;
    - ``hotfix.*`` sorts below ``patch.*`` regardless of the counter;
    - counters with the same identifier compare numerically, padded
      with zeros (``patch.1`` == ``patch.1.0.0`` < ``patch.10``).

    Args:
        version1: First version to compare
        version2: Second version to compare

    Returns:
        -1 if version1 < version2, 0 if equal, 1 if version1 > version2

    Raises:
        MalformedVersion: if either version is not valid semver
    """
    standard = semver.standard_compare(version1, version2)
    if standard != 0:
        return standard

    parsed1 = semver.parse(version1)
    parsed2 = semver.parse(version2)
    if parsed1 is None or parsed2 is None:
        return _resolved(standard, "unparsed", version1, version2)

    build1 = semver.build_identifiers(parsed1)
    build2 = semver.build_identifiers(parsed2)
    tag1 = ".".join(build1)
    tag2 = ".".join(build2)

    has_patch1 = has_patch_identifier(tag1)
    has_patch2 = has_patch_identifier(tag2)

    if not has_patch1 and not has_patch2:
        return standard

    # Containment is enough here; leading position is only checked below
    if has_patch1 and not build2:
        return _resolved(1, "tagged-vs-bare", version1, version2)
    if not build1 and has_patch2:
        return _resolved(-1, "tagged-vs-bare", version1, version2)

    if tag1 == tag2:
        return _resolved(0, "identical-tags", version1, version2)

    lead1, counter1 = _match_leading(tag1)
    lead2, counter2 = _match_leading(tag2)

    if lead1 and lead2:
        if lead1 != lead2:
            return _resolved(_cmp(lead1, lead2), "identifier", version1, version2)
        return _resolved(
            _compare_revisions(counter1, counter2), "revision", version1, version2
        )

    if lead1:
        return _resolved(1, "leading-identifier", version1, version2)
    if lead2:
        return _resolved(-1, "leading-identifier", version1, version2)

    return _resolved(_cmp(tag1, tag2), "build-tag", version1, version2)


# Long-form alias
custom_semver_compare = compare


def gt(version1: str, version2: str) -> bool:
    """True if version1 > version2."""
    return compare(version1, version2) > 0


def lt(version1: str, version2: str) -> bool:
    """True if version1 < version2."""
    return compare(version1, version2) < 0


def eq(version1: str, version2: str) -> bool:
    """True if version1 and version2 have equal precedence."""
    return compare(version1, version2) == 0


def gte(version1: str, version2: str) -> bool:
    return compare(version1, version2) >= 0


def lte(version1: str, version2: str) -> bool:
    return compare(version1, version2) <= 0


def valid(version: str) -> Optional[str]:
    """
    Return the normalized version (build metadata stripped), or None.

    ``valid("1.0.0+build")`` -> ``"1.0.0"``; ``valid("1.0")`` -> None.
    """
    return semver.validate(version)


sort_key = cmp_to_key(compare)


def sort(versions: Iterable[str]) -> List[str]:
    """Return versions in ascending order."""
    return sorted(versions, key=sort_key)


def rsort(versions: Iterable[str]) -> List[str]:
    """Return versions in descending order."""
    return sorted(versions, key=sort_key, reverse=True)
