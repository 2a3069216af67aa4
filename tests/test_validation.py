# SPDX-License-Identifier: MIT
"""Unit tests for release and environment name validation."""

import pytest

from release_parser import (
    ENVIRONMENT_RULES,
    RELEASE_RULES,
    ErrorKind,
    InvalidEnvironmentError,
    InvalidNameError,
    InvalidReleaseError,
    is_valid_environment,
    is_valid_release,
    validate_environment,
    validate_release,
)

BAD_CHARACTERS = ["/", "\\", "\r", "\n", "\t", "\x00", "\x1b", "\x1f", "\x7f"]


class TestValidateRelease:
    """Tests for validate_release function."""

    def test_valid_release(self):
        """Test that ordinary releases pass."""
        assert validate_release("my-app@1.0.0") is None
        assert validate_release("a86d127c4b2f") is None
        assert validate_release("latest-build") is None

    def test_max_length(self):
        """Test the 200 character limit."""
        assert validate_release("x" * 200) is None
        with pytest.raises(InvalidReleaseError) as exc_info:
            validate_release("x" * 201)
        assert exc_info.value.kind == ErrorKind.TOO_LONG

    @pytest.mark.parametrize("name", [".", "..", "latest", "LATEST", "Latest"])
    def test_restricted_names(self, name):
        """Test that reserved literals are rejected."""
        with pytest.raises(InvalidReleaseError) as exc_info:
            validate_release(name)
        assert exc_info.value.kind == ErrorKind.RESTRICTED_NAME

    def test_none_is_a_valid_release(self):
        """Test that the environment literal is not restricted for releases."""
        assert validate_release("none") is None

    @pytest.mark.parametrize("char", BAD_CHARACTERS)
    def test_bad_characters(self, char):
        """Test that slashes and control characters are rejected."""
        with pytest.raises(InvalidReleaseError) as exc_info:
            validate_release(f"foo{char}bar")
        assert exc_info.value.kind == ErrorKind.BAD_CHARACTERS

    def test_length_checked_first(self):
        """Test that length wins over other failures."""
        with pytest.raises(InvalidReleaseError) as exc_info:
            validate_release("/" * 201)
        assert exc_info.value.kind == ErrorKind.TOO_LONG

    def test_no_stripping(self):
        """Test that the validator sees surrounding whitespace."""
        with pytest.raises(InvalidReleaseError) as exc_info:
            validate_release("\tfoo")
        assert exc_info.value.kind == ErrorKind.BAD_CHARACTERS

    def test_error_attributes(self):
        """Test that the error exposes kind, value and message."""
        with pytest.raises(InvalidReleaseError) as exc_info:
            validate_release("latest")
        error = exc_info.value
        assert error.value == "latest"
        assert error.message == "Invalid release (RESTRICTED_NAME): release is restricted"
        assert isinstance(error, InvalidNameError)


class TestValidateEnvironment:
    """Tests for validate_environment function."""

    def test_valid_environment(self):
        """Test that ordinary environments pass."""
        assert validate_environment("production") is None
        assert validate_environment("latest") is None

    def test_max_length(self):
        """Test the 64 character limit."""
        assert validate_environment("x" * 64) is None
        with pytest.raises(InvalidEnvironmentError) as exc_info:
            validate_environment("x" * 65)
        assert exc_info.value.kind == ErrorKind.TOO_LONG

    @pytest.mark.parametrize("name", [".", "..", "none", "None", "NONE"])
    def test_restricted_names(self, name):
        """Test that reserved literals are rejected."""
        with pytest.raises(InvalidEnvironmentError) as exc_info:
            validate_environment(name)
        assert exc_info.value.kind == ErrorKind.RESTRICTED_NAME

    @pytest.mark.parametrize("char", BAD_CHARACTERS)
    def test_bad_characters(self, char):
        """Test that slashes and control characters are rejected."""
        with pytest.raises(InvalidEnvironmentError) as exc_info:
            validate_environment(f"prod{char}")
        assert exc_info.value.kind == ErrorKind.BAD_CHARACTERS

    def test_error_is_not_release_error(self):
        """Test that the two error classes are distinct."""
        with pytest.raises(InvalidEnvironmentError) as exc_info:
            validate_environment("none")
        assert not isinstance(exc_info.value, InvalidReleaseError)


class TestPredicates:
    """Tests for the boolean helpers."""

    def test_is_valid_release(self):
        """Test is_valid_release."""
        assert is_valid_release("foo@1.0") is True
        assert is_valid_release("..") is False

    def test_is_valid_environment(self):
        """Test is_valid_environment."""
        assert is_valid_environment("staging") is True
        assert is_valid_environment("none") is False


class TestRules:
    """Tests for the rule sets."""

    def test_release_rules(self):
        """Test release limits."""
        assert RELEASE_RULES.max_length == 200
        assert "latest" in RELEASE_RULES.restricted_names

    def test_environment_rules(self):
        """Test environment limits."""
        assert ENVIRONMENT_RULES.max_length == 64
        assert "none" in ENVIRONMENT_RULES.restricted_names
