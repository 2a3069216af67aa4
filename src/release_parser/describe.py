# SPDX-License-Identifier: MIT
"""Abbreviated, human-readable descriptions of releases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .release import Release

SHORT_HASH_LENGTH = 12


class ReleaseDescription:
    """Read-only view that renders a release for display.

    - Versioned releases show the canonical short version, followed by the
      short build hash or the build code in parentheses.
    - Releases that only carry a hash show the first 12 hash characters.
    - Anything else falls back to the canonical release string.
    """

    __slots__ = ("release",)

    def __init__(self, release: "Release"):
        self.release = release

    def __repr__(self) -> str:
        return f"ReleaseDescription({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReleaseDescription):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    @property
    def short_hash(self) -> Optional[str]:
        """Return the build hash truncated for display, if any."""
        build_hash = self.release.build_hash
        if build_hash is None:
            return None
        return build_hash[:SHORT_HASH_LENGTH]

    def __str__(self) -> str:
        version = self.release.version
        short_hash = self.short_hash
        if version is not None:
            rv = version.short
            if short_hash is not None:
                rv += f" ({short_hash})"
            elif version.build_code is not None:
                rv += f" ({version.build_code})"
            return rv
        if short_hash is not None:
            return short_hash
        return str(self.release)
