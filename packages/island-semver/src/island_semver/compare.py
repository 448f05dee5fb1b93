# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Pre-release ordering: identifiers are compared left to right, numeric
identifiers by value, alphanumeric ones by ASCII order, and numeric below
alphanumeric. A release outranks any of its pre-releases.
Build metadata is ignored in comparisons per SemVer 2.0.0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .identifiers import (
    AlphanumericIdentifier,
    NumericIdentifier,
    classify_identifier,
    compare_identifiers,
)

if TYPE_CHECKING:
    from .semver import SemanticVersion


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier tuples.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        if p1 == p2:
            continue
        return compare_identifiers(classify_identifier(p1), classify_identifier(p2))

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_precedence(version1: SemanticVersion, version2: SemanticVersion) -> int:
    """Compare two versions by SemVer precedence.

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Note:
        Build metadata is ignored, so ``1.0.0+a`` and ``1.0.0+b`` have equal
        precedence even though they are not equal.

    Examples:
        >>> from island_semver import parse_version
        >>> compare_precedence(parse_version("1.0.0-rc.2"), parse_version("1.0.0-rc.10"))
        -1
    """
    core1 = (version1.major, version1.minor, version1.patch)
    core2 = (version2.major, version2.minor, version2.patch)
    if core1 != core2:
        return -1 if core1 < core2 else 1

    return _compare_prerelease(version1.prerelease_identifiers, version2.prerelease_identifiers)


def compare_versions(
    version1: Union[str, SemanticVersion], version2: Union[str, SemanticVersion]
) -> int:
    """Compare two semantic versions given as strings or SemanticVersion objects.

    Args:
        version1: First version (string or SemanticVersion object)
        version2: Second version (string or SemanticVersion object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        VersionDecodeError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
    """
    from .codec import decode_version

    v1 = decode_version(version1) if isinstance(version1, str) else version1
    v2 = decode_version(version2) if isinstance(version2, str) else version2
    return compare_precedence(v1, v2)


def _identifier_key(identifier: str) -> tuple:
    match classify_identifier(identifier):
        case NumericIdentifier(digits=digits):
            return (0, len(digits), digits)
        case AlphanumericIdentifier(text=text):
            return (1, text)


def precedence_key(version: Union[str, SemanticVersion]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly as ``compare_precedence`` does, and versions that
    differ only in build metadata get equal keys.

    Args:
        version: Version string or SemanticVersion object

    Returns:
        A tuple that can be used for sorting versions

    Raises:
        VersionDecodeError: If a version string is invalid

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=precedence_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    from .codec import decode_version

    v = decode_version(version) if isinstance(version, str) else version

    # Pre-release key: none becomes (1,) to sort after pre-releases
    # Pre-release identifiers become (0, parsed_parts...)
    if not v.prerelease_identifiers:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part) for part in v.prerelease_identifiers))

    return (v.major, v.minor, v.patch, prerelease_key)
