# SPDX-License-Identifier: MIT
"""Bridge to the ``semver`` package.

Requires the ``semver`` extra: ``pip install release-parser[semver]``.

The native Version ordering compares pre-releases as plain strings. The
helpers here convert to ``semver.Version`` for strict SemVer precedence,
where "rc.2" sorts below "rc.10".
"""

from __future__ import annotations

from typing import Optional, Union

import semver

from .version import Version, parse_version


def identifiers(value: Optional[str]) -> tuple[Union[int, str], ...]:
    """Split a dotted pre-release or build string into identifiers.

    All-digit segments become ints, everything else stays a string.

    Examples:
        >>> identifiers("rc.1")
        ('rc', 1)
        >>> identifiers(None)
        ()
    """
    if not value:
        return ()
    return tuple(int(part) if part.isdigit() else part for part in value.split("."))


def as_semver(version: Version) -> semver.Version:
    """Convert a Version to a ``semver.Version``.

    The revision component has no SemVer counterpart and is dropped.

    Examples:
        >>> str(as_semver(parse_version("1.2rc1+abc")))
        '1.2.0-rc1+abc'
    """
    return semver.Version(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=version.pre,
        build=version.build_code,
    )


def cmp_precedence(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions by SemVer precedence.

    Numeric components compare first, then pre-release identifiers field by
    field. Build metadata is ignored.

    Returns:
        -1, 0 or 1

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> cmp_precedence("1.0.0-rc.2", "1.0.0-rc.10")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return as_semver(v1).compare(as_semver(v2))
