# SPDX-License-Identifier: MIT
"""Version comparison.

Ordering: numeric components first (missing ones count as 0), then a
version without pre-release ranks above one with a pre-release, and two
pre-releases compare as plain strings. Build metadata never affects order.

This is deliberately simpler than SemVer precedence, where dotted
pre-release identifiers are compared field by field; use
``release_parser.semver_compat.cmp_precedence`` for that.
"""

from __future__ import annotations

from typing import Union

from .version import Version, precedence_key, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        A result of 0 does not mean the versions are equal: "1.0.0+10" and
        "1.0.0+20" compare as 0 but are not ``==``.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0", "1.0.0")
        0
        >>> compare_versions("1.0.0-rc1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+10", "1.0.0+20")
        0
    """
    key1 = precedence_key(_coerce(version1))
    key2 = precedence_key(_coerce(version2))
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0']
    """
    return precedence_key(_coerce(version))
