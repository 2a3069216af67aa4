# SPDX-License-Identifier: MIT
"""Exception classes raised by the release parser."""

from __future__ import annotations


class ErrorKind:
    """Reasons a release or environment name is rejected.

    Checked in declaration order: length first, then restricted literal,
    then character class.
    """

    TOO_LONG = "TOO_LONG"
    RESTRICTED_NAME = "RESTRICTED_NAME"
    BAD_CHARACTERS = "BAD_CHARACTERS"


_KIND_MESSAGES = {
    ErrorKind.TOO_LONG: "name is too long",
    ErrorKind.RESTRICTED_NAME: "name is restricted",
    ErrorKind.BAD_CHARACTERS: "name contains invalid characters",
}


class InvalidVersionError(Exception):
    """Raised when a string does not match the version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class InvalidNameError(Exception):
    """Base class for rejected release and environment names.

    Attributes:
        kind: One of the ErrorKind constants
        value: The rejected name
        message: Human-readable error message
    """

    label = "name"

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        reason = _KIND_MESSAGES.get(kind, kind).replace("name", self.label, 1)
        self.message = f"Invalid {self.label} ({kind}): {reason}"
        super().__init__(self.message)


class InvalidReleaseError(InvalidNameError):
    """Raised when a release name fails validation."""

    label = "release"


class InvalidEnvironmentError(InvalidNameError):
    """Raised when an environment name fails validation."""

    label = "environment"
