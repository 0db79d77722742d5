# SPDX-License-Identifier: MIT
"""The Version value type, its builder, and the parse entry points.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Two grammars are available. The strict grammar requires all three numeric
components; the partial grammar requires only the major component and
defaults an absent minor or patch to 0.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .core import VersionCore
from .errors import ParseError, ValidationError
from .grammar import (
    PARTIAL_SEMVER_PATTERN,
    SEMVER_PATTERN,
    validate_build,
    validate_build_identifier,
    validate_component,
    validate_prerelease,
    validate_prerelease_identifier,
)
from .metadata import MetadataLike, VersionMetadata
from .precedence import Comparable, compare_prerelease

logger = logging.getLogger(__name__)


def _metadata(
    value: MetadataLike,
    validate_text: Callable[[Optional[str]], Optional[str]],
    validate_identifier: Callable[[str], str],
) -> Optional[VersionMetadata]:
    """Validate a pre-release or build field and normalize empty to None."""
    if value is None or isinstance(value, str):
        return VersionMetadata.parse(validate_text(value)) or None
    metadata = VersionMetadata.coerce(value)
    for identifier in metadata:
        validate_identifier(identifier)
    return metadata or None


def _prerelease(value: MetadataLike) -> Optional[VersionMetadata]:
    return _metadata(value, validate_prerelease, validate_prerelease_identifier)


def _build(value: MetadataLike) -> Optional[VersionMetadata]:
    return _metadata(value, validate_build, validate_build_identifier)


@dataclass(frozen=True, slots=True)
class Version(Comparable):
    """Represents a semantic version.

    Equality (``==`` and ``hash``) covers every field, build metadata
    included. Ordering follows SemVer precedence, which ignores build
    metadata, so ``equivalent_to`` may hold for versions that are not equal.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g. "alpha.1"), or None
        build: Build metadata identifiers (e.g. "build.123"), or None

    Raises:
        ValidationError: If any field is invalid

    Examples:
        >>> Version(1, 2, 3, "alpha.1")
        Version(major=1, minor=2, patch=3, prerelease=VersionMetadata(identifiers=('alpha', '1')), build=None)
        >>> str(Version.of(2, prerelease="rc.1", build="456"))
        '2.0.0-rc.1+456'
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Optional[VersionMetadata] = None
    build: Optional[VersionMetadata] = None

    def __post_init__(self) -> None:
        validate_component(self.major, "major")
        validate_component(self.minor, "minor")
        validate_component(self.patch, "patch")
        object.__setattr__(self, "prerelease", _prerelease(self.prerelease))
        object.__setattr__(self, "build", _build(self.build))

    @classmethod
    def of(
        cls,
        major: int,
        minor: int = 0,
        patch: int = 0,
        prerelease: MetadataLike = None,
        build: MetadataLike = None,
    ) -> Version:
        """Create a validated version; ``0.0.0`` returns the zero singleton."""
        version = cls(major, minor, patch, prerelease, build)
        return ZERO if version == ZERO else version

    @classmethod
    def zero(cls) -> Version:
        return ZERO

    @classmethod
    def builder(cls) -> VersionBuilder:
        return VersionBuilder()

    @classmethod
    def parse(cls, text: str) -> Optional[Version]:
        return parse(text)

    @classmethod
    def parse_or_fail(cls, text: str) -> Version:
        return parse_or_fail(text)

    @classmethod
    def parse_strict(cls, text: str) -> Optional[Version]:
        return parse_strict(text)

    @classmethod
    def parse_strict_or_fail(cls, text: str) -> Version:
        return parse_strict_or_fail(text)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def core(self) -> VersionCore:
        return VersionCore.of(self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def has_metadata(self) -> bool:
        """Return True if either a pre-release or build metadata is present."""
        return self.prerelease is not None or self.build is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def version(self) -> Version:
        return self

    def to_builder(self) -> VersionBuilder:
        return VersionBuilder(self)

    def compare_to(self, other: Version) -> int:
        """Compare precedence: -1, 0 or 1. Build metadata is ignored."""
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        diff = self.core.compare_to(other.core)
        if diff != 0:
            return diff
        return compare_prerelease(
            self.prerelease.identifiers if self.prerelease else None,
            other.prerelease.identifiers if other.prerelease else None,
        )

    def equivalent_to(self, other: Version) -> bool:
        """Return True if both versions have the same precedence."""
        return self.compare_to(other) == 0

    def at_least(self, major: int, *parts: int) -> bool:
        return self.core.at_least(major, *parts)

    def at_most(self, major: int, *parts: int) -> bool:
        return self.core.at_most(major, *parts)

    def is_(self, major: int, *parts: int) -> bool:
        return self.core.is_(major, *parts)

    def is_any(self, major: int, minor: Optional[int] = None) -> bool:
        return self.core.is_any(major, minor)


ZERO = Version(0, 0, 0)


class VersionBuilder:
    """Mutable scratch copy of a Version's fields.

    The builder is seeded from an existing version (or the zero version) and
    produces a new immutable Version from ``build()``. Every setter validates
    its input immediately.

    Example:
        >>> str(Version.of(1, 2, 3).to_builder().minor(4).prerelease("rc.1").build())
        '1.4.3-rc.1'
    """

    def __init__(self, seed: Optional[Version] = None):
        if seed is None:
            seed = ZERO
        self._core = seed.core.to_builder()
        self._prerelease = seed.prerelease
        self._build = seed.build

    def major(self, major: int) -> VersionBuilder:
        self._core.major(major)
        return self

    def minor(self, minor: int) -> VersionBuilder:
        self._core.minor(minor)
        return self

    def patch(self, patch: int) -> VersionBuilder:
        self._core.patch(patch)
        return self

    def core(self, core: VersionCore) -> VersionBuilder:
        if not isinstance(core, VersionCore):
            raise ValidationError(
                "core", "VersionCore", core, f"core must be a VersionCore, got {type(core).__name__}"
            )
        self._core = core.to_builder()
        return self

    def prerelease(self, prerelease: MetadataLike) -> VersionBuilder:
        self._prerelease = _prerelease(prerelease)
        return self

    def build_metadata(self, build: MetadataLike) -> VersionBuilder:
        self._build = _build(build)
        return self

    def build(self) -> Version:
        core = self._core.build()
        return Version.of(core.major, core.minor, core.patch, self._prerelease, self._build)


def _parse_or_fail(pattern: re.Pattern[str], pattern_name: str, text: Any) -> Version:
    if not isinstance(text, str):
        raise ParseError(
            pattern_name, text, f"Version must be a string, got {type(text).__name__}"
        )

    match = pattern.fullmatch(text)
    if not match:
        raise ParseError(
            pattern_name,
            text,
            f"Version must match the {pattern_name} pattern `{pattern.pattern}` "
            f"but received invalid input: {text!r}",
        )

    # Digit runs past the int conversion limit or MAX_COMPONENT land here
    try:
        return Version.of(
            int(match.group("major")),
            int(match.group("minor") or 0),
            int(match.group("patch") or 0),
            match.group("prerelease"),
            match.group("buildmetadata"),
        )
    except ValueError as e:
        raise ParseError(
            pattern_name, text, f"Version components are out of range: {e}"
        ) from e


def _parse_or_none(pattern: re.Pattern[str], pattern_name: str, text: Any) -> Optional[Version]:
    try:
        return _parse_or_fail(pattern, pattern_name, text)
    except ParseError as e:
        logger.debug("Could not parse %s version: %s", pattern_name, e)
        return None


def parse_or_fail(text: str) -> Version:
    """Parse a partial version string, where minor and patch are optional.

    Raises:
        ParseError: If the text does not match the partial grammar

    Examples:
        >>> str(parse_or_fail("1"))
        '1.0.0'
        >>> str(parse_or_fail("1.2-beta+exp"))
        '1.2.0-beta+exp'
    """
    return _parse_or_fail(PARTIAL_SEMVER_PATTERN, "partial", text)


def parse(text: str) -> Optional[Version]:
    """Parse a partial version string, returning None if it is invalid."""
    return _parse_or_none(PARTIAL_SEMVER_PATTERN, "partial", text)


def parse_strict_or_fail(text: str) -> Version:
    """Parse a strict MAJOR.MINOR.PATCH[-prerelease][+build] version string.

    Args:
        text: A string following semantic versioning format

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the text does not follow semantic versioning

    Examples:
        >>> str(parse_strict_or_fail("1.0.0-alpha.1"))
        '1.0.0-alpha.1'
    """
    return _parse_or_fail(SEMVER_PATTERN, "strict", text)


def parse_strict(text: str) -> Optional[Version]:
    """Parse a strict version string, returning None if it is invalid."""
    return _parse_or_none(SEMVER_PATTERN, "strict", text)
