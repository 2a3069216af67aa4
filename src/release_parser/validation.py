# SPDX-License-Identifier: MIT
"""Validation of release and environment names.

Both validators apply the same three checks, in order:
1. Length limit
2. Restricted literals (case-insensitive)
3. Forbidden characters: slashes, backslashes, DEL and C0 control characters

Validators do not strip whitespace; callers that accept padded input
should strip it first, as Release.parse does.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Type

from .errors import (
    ErrorKind,
    InvalidEnvironmentError,
    InvalidNameError,
    InvalidReleaseError,
)

BAD_CHARACTERS_PATTERN = re.compile(r"[\x00-\x1f\x7f/\\]")


@dataclass(frozen=True, slots=True)
class NameRules:
    """Limits applied to a kind of name."""

    max_length: int
    restricted_names: frozenset[str]


RELEASE_RULES = NameRules(
    max_length=200,
    restricted_names=frozenset({".", "..", "latest"}),
)

ENVIRONMENT_RULES = NameRules(
    max_length=64,
    restricted_names=frozenset({".", "..", "none"}),
)


def validate_name(value: str, rules: NameRules, error_cls: Type[InvalidNameError]) -> None:
    """Check a name against a set of rules.

    Args:
        value: The name to check
        rules: Length limit and restricted literals to apply
        error_cls: Exception class to raise on failure

    Raises:
        error_cls: With the kind of the first failed check
    """
    if len(value) > rules.max_length:
        raise error_cls(ErrorKind.TOO_LONG, value)
    if value.lower() in rules.restricted_names:
        raise error_cls(ErrorKind.RESTRICTED_NAME, value)
    if BAD_CHARACTERS_PATTERN.search(value):
        raise error_cls(ErrorKind.BAD_CHARACTERS, value)


def validate_release(release: str) -> None:
    """Check that a string is acceptable as a release name.

    Raises:
        InvalidReleaseError: If the name is longer than 200 characters, is
            ".", ".." or "latest", or contains forbidden characters

    Examples:
        >>> validate_release("my-app@1.0.0")
        >>> validate_release("Latest")
        Traceback (most recent call last):
        ...
        release_parser.errors.InvalidReleaseError: Invalid release (RESTRICTED_NAME): release is restricted
    """
    validate_name(release, RELEASE_RULES, InvalidReleaseError)


def validate_environment(environment: str) -> None:
    """Check that a string is acceptable as an environment name.

    Raises:
        InvalidEnvironmentError: If the name is longer than 64 characters, is
            ".", ".." or "none", or contains forbidden characters
    """
    validate_name(environment, ENVIRONMENT_RULES, InvalidEnvironmentError)


def is_valid_release(release: str) -> bool:
    """Return True if the string passes validate_release."""
    try:
        validate_release(release)
    except InvalidReleaseError:
        return False
    return True


def is_valid_environment(environment: str) -> bool:
    """Return True if the string passes validate_environment."""
    try:
        validate_environment(environment)
    except InvalidEnvironmentError:
        return False
    return True
