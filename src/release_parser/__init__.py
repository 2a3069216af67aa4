# SPDX-License-Identifier: MIT
"""Parsing, comparison and display of release identifiers.

A release identifier labels a software build, usually as ``package@version``.
This package splits it into package and version, recognizes content hashes,
compares versions and renders canonical and abbreviated forms.

Example:
    >>> from release_parser import parse_release, compare_versions, validate_environment
    >>>
    >>> release = parse_release("org.example.FooApp@1.0rc1+20200101100")
    >>> release.package
    'org.example.FooApp'
    >>> release.version.pre
    'rc1'
    >>> str(release)
    'org.example.FooApp@1.0.0-rc1+20200101100'
    >>> str(release.describe())
    '1.0.0-rc1 (20200101100)'
    >>>
    >>> compare_versions("1.0.0-rc1", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    InvalidEnvironmentError,
    InvalidNameError,
    InvalidReleaseError,
    InvalidVersionError,
)
from .version import (
    Version,
    parse_version,
    is_valid_version,
    is_build_hash,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
from .validation import (
    NameRules,
    RELEASE_RULES,
    ENVIRONMENT_RULES,
    validate_release,
    validate_environment,
    is_valid_release,
    is_valid_environment,
)
from .release import (
    Release,
    ReleaseFormat,
    parse_release,
)
from .describe import ReleaseDescription
from .schema import (
    ReleaseInfo,
    VersionInfo,
)

__all__ = [
    # Errors
    "ErrorKind",
    "InvalidVersionError",
    "InvalidNameError",
    "InvalidReleaseError",
    "InvalidEnvironmentError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "is_build_hash",
    "VERSION_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    # Validation
    "NameRules",
    "RELEASE_RULES",
    "ENVIRONMENT_RULES",
    "validate_release",
    "validate_environment",
    "is_valid_release",
    "is_valid_environment",
    # Release parsing
    "Release",
    "ReleaseFormat",
    "ReleaseDescription",
    "parse_release",
    # Serialization
    "ReleaseInfo",
    "VersionInfo",
]
