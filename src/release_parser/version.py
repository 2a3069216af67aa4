# SPDX-License-Identifier: MIT
"""Version parsing for release identifiers.

Accepts a relaxed superset of semantic versioning:
- One to four numeric components: 1, 1.2, 1.2.3, 1.2.3.4 (leading zeros allowed)
- Pre-release after a dash (-rc.1) or attached to a dotted version (1.0alpha2)
- Build metadata after a plus, including dotted build numbers (+1.2.3)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidVersionError

# A single pre-release identifier: numeric without leading zero, or alphanumeric
_IDENTIFIER = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_PRERELEASE = rf"{_IDENTIFIER}(?:\.{_IDENTIFIER})*"

VERSION_PATTERN = re.compile(
    r"^(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+)"
    r"(?:\.(?P<patch>[0-9]+)"
    r"(?:\.(?P<revision>[0-9]+))?)?)?"
    rf"(?:-(?P<prerelease>{_PRERELEASE})|(?=[a-z])(?P<attached_prerelease>{_PRERELEASE}))?"
    r"(?:\+(?P<build_code>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

# Dotted build numbers that get zero-padded for fixed-width sorting
BUILD_CODE_PATTERN = re.compile(
    r"^(?P<major>[0-9]{1,12})(?:\.(?P<minor>[0-9]{1,10})(?:\.(?P<patch>[0-9]{1,10}))?)?$"
)

HASH_LENGTHS = frozenset({12, 16, 20, 32, 40, 64})
_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")


def is_build_hash(value: str) -> bool:
    """Check if a string looks like a content hash.

    A hash has one of the common digest lengths (12, 16, 20, 32, 40 or 64)
    and consists only of hexadecimal digits.

    Examples:
        >>> is_build_hash("a86d127c4b2f")
        True
        >>> is_build_hash("1.0.0")
        False
    """
    return len(value) in HASH_LENGTHS and _HEX_PATTERN.fullmatch(value) is not None


def precedence_key(version: "Version") -> tuple:
    """Return the tuple that orders versions by precedence."""
    # A missing pre-release ranks above any pre-release of the same quad.
    # Pre-releases compare as plain strings, build codes are ignored.
    if version.pre is None:
        return (version.quad, 1, "")
    return (version.quad, 0, version.pre)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed version.

    Equality covers the numeric components, pre-release and build code.
    Ordering covers only the numeric components and pre-release, so two
    versions that differ in build code are unequal but neither sorts
    before the other.

    Attributes:
        raw: The exact text that was parsed
        major: Major version number
        minor: Minor version number (0 when absent)
        patch: Patch version number (0 when absent)
        revision: Fourth version number (0 when absent)
        components: Number of numeric components present in the input (1-4)
        pre: Optional pre-release identifier without its leading dash
        build_code: Optional build metadata after the plus sign
        raw_short: The raw text up to the build metadata separator
        raw_quad: Raw text of each numeric component, None when absent
    """

    raw: str
    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    components: int = 1
    pre: Optional[str] = None
    build_code: Optional[str] = None
    raw_short: str = ""
    raw_quad: tuple[Optional[str], ...] = (None, None, None, None)

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.short
        if self.build_code is not None:
            version += f"+{self.build_code}"
        return version

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (self.quad, self.pre, self.build_code) == (
            other.quad,
            other.pre,
            other.build_code,
        )

    def __hash__(self) -> int:
        return hash((self.quad, self.pre, self.build_code))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence_key(self) < precedence_key(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence_key(self) <= precedence_key(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence_key(self) > precedence_key(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return precedence_key(self) >= precedence_key(other)

    @property
    def triple(self) -> tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    @property
    def quad(self) -> tuple[int, int, int, int]:
        """Return (major, minor, patch, revision)."""
        return (self.major, self.minor, self.patch, self.revision)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.pre is not None

    @property
    def short(self) -> str:
        """Return the canonical version without build metadata.

        Numeric components are rendered without leading zeros, always with
        at least major.minor.patch and with the revision when it was given.
        """
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.components > 3:
            version += f".{self.revision}"
        if self.pre is not None:
            version += f"-{self.pre}"
        return version

    @property
    def normalized_build_code(self) -> str:
        """Return the build code normalized for sorting.

        Dotted build numbers (N, N.N or N.N.N) become fixed-width zero-padded
        digits so they sort correctly as strings. Anything else is lowercased.
        Returns an empty string when there is no build code.

        Examples:
            >>> Version.parse("1.0+1.2").normalized_build_code
            '00000000000100000000020000000000'
            >>> Version.parse("1.0+Build-A").normalized_build_code
            'build-a'
        """
        if self.build_code is None:
            return ""
        match = BUILD_CODE_PATTERN.fullmatch(self.build_code)
        if match is None:
            return self.build_code.lower()
        return "%012d%010d%010d" % (
            int(match.group("major")),
            int(match.group("minor") or 0),
            int(match.group("patch") or 0),
        )


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A version such as "1.2.3", "1.0rc1" or "2.0.0-beta.2+1.2"

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not match the version grammar,
            or a single numeric component is directly followed by a letter

    Examples:
        >>> v = parse_version("1.0rc1+20200101100")
        >>> v.triple, v.components, v.pre, v.build_code
        ((1, 0, 0), 2, 'rc1', '20200101100')

        >>> parse_version("1a1")
        Traceback (most recent call last):
        ...
        release_parser.errors.InvalidVersionError: Invalid version: 1a1
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = VERSION_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    raw_quad = (
        match.group("major"),
        match.group("minor"),
        match.group("patch"),
        match.group("revision"),
    )
    components = sum(1 for part in raw_quad if part is not None)

    # "1a1" is too ambiguous to be a version; "1.0a1" and "1-a1" are fine
    attached = match.group("attached_prerelease")
    if attached is not None and components == 1:
        raise InvalidVersionError(version_string)

    build_code = match.group("build_code")
    if build_code is not None:
        raw_short = version_string[: match.start("build_code") - 1]
    else:
        raw_short = version_string

    return Version(
        raw=version_string,
        major=int(raw_quad[0]),
        minor=int(raw_quad[1] or 0),
        patch=int(raw_quad[2] or 0),
        revision=int(raw_quad[3] or 0),
        components=components,
        pre=match.group("prerelease") or attached,
        build_code=build_code,
        raw_short=raw_short,
        raw_quad=raw_quad,
    )


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0alpha2")
        True
        >>> is_valid_version("1a1")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
