# SPDX-License-Identifier: MIT
"""Release name parsing.

A release is a string of the form ``package@version``, where both parts are
optional in practice:
- ``@acme.web@1.2.3``: scoped npm-style package with a version
- ``org.example.App@1.0rc1+2020``: bundle identifier with build metadata
- ``a86d127c4b2f23a0a862620280427dcc01c78676``: a bare commit hash
- ``my-service@deploy-42``: qualified release whose version is free text
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .describe import ReleaseDescription
from .errors import InvalidVersionError
from .validation import validate_release
from .version import Version, is_build_hash, parse_version

logger = logging.getLogger(__name__)

# Package is everything up to the last "@" that still leaves a version behind
RELEASE_PATTERN = re.compile(r"^(?P<package>.+)@(?P<version>.+?)$", re.DOTALL)

# Unicode White_Space, which excludes the C0 separators 0x1C-0x1F
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


class ReleaseFormat:
    """How much structure a release carries."""

    VERSIONED = "versioned"
    QUALIFIED = "qualified"
    UNQUALIFIED = "unqualified"


@dataclass(frozen=True, slots=True)
class Release:
    """Represents a parsed release name.

    Attributes:
        raw: The release name with surrounding whitespace removed
        package: Optional package qualifier before the "@"
        version_raw: Text after the "@", or the whole name when unqualified
        version: Parsed version, None when version_raw is a hash or not a version
    """

    raw: str
    package: Optional[str]
    version_raw: str
    version: Optional[Version] = None

    @classmethod
    def parse(cls, release: str) -> "Release":
        """Parse a release name. See :func:`parse_release`."""
        return parse_release(release)

    def __str__(self) -> str:
        """Return the canonical string representation of the release.

        Versions are rendered with at least three components, so the result
        can be longer than raw: "p@1-rc" becomes "p@1.0.0-rc". A release close
        to the length limit may therefore not parse back from its canonical form.
        """
        rv = f"{self.package}@" if self.package else ""
        if self.version is not None:
            rv += str(self.version)
        else:
            rv += self.version_raw
        return rv

    @property
    def build_hash(self) -> Optional[str]:
        """Return the content hash this release refers to, if any.

        The build code of the version wins when it looks like a hash,
        otherwise an unparsed version_raw that looks like a hash is used.
        """
        if (
            self.version is not None
            and self.version.build_code is not None
            and is_build_hash(self.version.build_code)
        ):
            return self.version.build_code
        if self.version is None and is_build_hash(self.version_raw):
            return self.version_raw
        return None

    @property
    def format(self) -> str:
        """Return one of the ReleaseFormat constants."""
        if self.version is not None:
            return ReleaseFormat.VERSIONED
        if self.package:
            return ReleaseFormat.QUALIFIED
        return ReleaseFormat.UNQUALIFIED

    def describe(self) -> ReleaseDescription:
        """Return an abbreviated, human-readable view of the release.

        Examples:
            >>> str(parse_release("org.example.FooApp@1.0rc1+20200101100").describe())
            '1.0.0-rc1 (20200101100)'
        """
        return ReleaseDescription(self)


def parse_release(release: str) -> Release:
    """Parse a release name into a Release object.

    Surrounding whitespace is stripped and the name is validated. A version
    part that is a hash or does not parse is kept as version_raw only; it
    never makes the release invalid.

    Args:
        release: A release name such as "my-app@1.2.3"

    Returns:
        A Release object

    Raises:
        InvalidReleaseError: If the name fails validate_release

    Examples:
        >>> r = parse_release("@foo.bar.baz--blah@1.2.3-dev")
        >>> r.package, r.version_raw
        ('@foo.bar.baz--blah', '1.2.3-dev')
    """
    release = release.strip(WHITESPACE)
    validate_release(release)

    match = RELEASE_PATTERN.fullmatch(release)
    if match:
        package: Optional[str] = match.group("package")
        version_raw = match.group("version")
    else:
        package = None
        version_raw = release

    version: Optional[Version] = None
    if is_build_hash(version_raw):
        logger.debug("Release %r refers to a build hash, not parsing version", release)
    else:
        try:
            version = parse_version(version_raw)
        except InvalidVersionError:
            logger.debug("Release %r has no parseable version in %r", release, version_raw)

    return Release(raw=release, package=package, version_raw=version_raw, version=version)
