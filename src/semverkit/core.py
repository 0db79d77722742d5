# SPDX-License-Identifier: MIT
"""The numeric MAJOR.MINOR.PATCH triple and its range predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .grammar import MAX_COMPONENT, validate_component
from .precedence import Comparable, compare_core


@dataclass(frozen=True, slots=True)
class VersionCore(Comparable):
    """Immutable (major, minor, patch) triple, ignoring all metadata.

    Range predicates treat omitted trailing components as wildcards:

        >>> core = VersionCore(2, 5, 0)
        >>> core.at_least(2), core.at_least(2, 6)
        (True, False)
        >>> core.is_any(2, 5), core.is_any(3)
        (True, False)
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        validate_component(self.major, "major")
        validate_component(self.minor, "minor")
        validate_component(self.patch, "patch")

    @classmethod
    def of(cls, major: int, minor: int = 0, patch: int = 0) -> VersionCore:
        core = cls(major, minor, patch)
        return ZERO_CORE if core == ZERO_CORE else core

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def to_builder(self) -> CoreBuilder:
        return CoreBuilder(self)

    def compare_to(self, other: VersionCore) -> int:
        return compare_core(self.as_tuple(), other.as_tuple())

    def _compare_parts(self, major: int, minor: int, patch: int) -> int:
        return compare_core(self.as_tuple(), (major, minor, patch))

    # >= 1.2.3, >= 1.2.*, >= 1.*.*
    def at_least(self, major: int, minor: int = 0, patch: int = 0) -> bool:
        return self._compare_parts(major, minor, patch) >= 0

    # <= 1.2.3, <= 1.2.*, <= 1.*.*
    def at_most(
        self, major: int, minor: int = MAX_COMPONENT, patch: int = MAX_COMPONENT
    ) -> bool:
        return self._compare_parts(major, minor, patch) <= 0

    # == 1.2.3
    def is_(self, major: int, minor: int = 0, patch: int = 0) -> bool:
        return self._compare_parts(major, minor, patch) == 0

    # == 1.2.*, == 1.*.*
    def is_any(self, major: int, minor: Optional[int] = None) -> bool:
        if minor is None:
            return self.at_least(major) and self.at_most(major)
        return self.at_least(major, minor) and self.at_most(major, minor)


ZERO_CORE = VersionCore(0, 0, 0)


class CoreBuilder:
    """Mutable scratch copy of a VersionCore.

    Setters validate immediately and return the builder for chaining.
    """

    def __init__(self, seed: Optional[VersionCore] = None):
        seed = seed if seed is not None else ZERO_CORE
        self._major = seed.major
        self._minor = seed.minor
        self._patch = seed.patch

    def major(self, major: int) -> CoreBuilder:
        self._major = validate_component(major, "major")
        return self

    def minor(self, minor: int) -> CoreBuilder:
        self._minor = validate_component(minor, "minor")
        return self

    def patch(self, patch: int) -> CoreBuilder:
        self._patch = validate_component(patch, "patch")
        return self

    def build(self) -> VersionCore:
        return VersionCore.of(self._major, self._minor, self._patch)
