# SPDX-License-Identifier: MIT
"""Pydantic records for exchanging parsed releases.

The records flatten a Release into plain fields for JSON interchange. Field
names follow the serialized form used by other release parser ports.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .release import Release
from .version import Version


class VersionInfo(BaseModel):
    """Parsed version fields."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    revision: int = Field(ge=0)
    components: int = Field(default=3, ge=1, le=4)
    raw_quad: tuple[Optional[str], Optional[str], Optional[str], Optional[str]] = (
        None,
        None,
        None,
        None,
    )
    pre: Optional[str] = None
    build_code: Optional[str] = None
    normalized_build_code: str = ""

    @classmethod
    def from_version(cls, version: Version) -> "VersionInfo":
        """Create a record from a parsed Version."""
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            revision=version.revision,
            components=version.components,
            raw_quad=version.raw_quad,
            pre=version.pre,
            build_code=version.build_code,
            normalized_build_code=version.normalized_build_code,
        )


class ReleaseInfo(BaseModel):
    """Parsed release fields, including derived hash and description."""

    model_config = ConfigDict(frozen=True)

    package: Optional[str] = None
    version_raw: str
    version_parsed: Optional[VersionInfo] = None
    build_hash: Optional[str] = None
    description: str
    format: str = Field(description="One of versioned, qualified or unqualified")

    @classmethod
    def from_release(cls, release: Release) -> "ReleaseInfo":
        """Create a record from a parsed Release."""
        version = release.version
        return cls(
            package=release.package,
            version_raw=release.version_raw,
            version_parsed=VersionInfo.from_version(version) if version is not None else None,
            build_hash=release.build_hash,
            description=str(release.describe()),
            format=release.format,
        )
