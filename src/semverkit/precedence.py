# SPDX-License-Identifier: MIT
"""Precedence rules from SemVer 2.0.0 section 11.

Build metadata never participates in precedence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from .grammar import is_numeric


def _sign(diff: int) -> int:
    return (diff > 0) - (diff < 0)


def compare_identifiers(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare two dot-separated pre-release identifier sequences.

    Identifiers are compared left to right until a difference is found:

    - identifiers consisting only of digits are compared numerically
    - numeric identifiers always have lower precedence than alphanumeric ones
    - other identifiers are compared lexically in ASCII sort order
    - a larger set of fields has higher precedence than a smaller set,
      if all of the preceding identifiers are equal

    Returns:
        -1 if left < right, 0 if they are equal, 1 if left > right

    Examples:
        >>> compare_identifiers(["alpha"], ["alpha", "1"])
        -1
        >>> compare_identifiers(["beta", "11"], ["beta", "2"])
        1
    """
    for left_id, right_id in zip(left, right):
        left_numeric = is_numeric(left_id)
        right_numeric = is_numeric(right_id)

        if left_numeric and right_numeric:
            # Without leading zeros, a longer number is the larger one
            left_key = (len(left_id), left_id)
            right_key = (len(right_id), right_id)
            if left_key != right_key:
                return -1 if left_key < right_key else 1
        elif left_numeric:
            return -1
        elif right_numeric:
            return 1
        elif left_id != right_id:
            return -1 if left_id < right_id else 1

    return _sign(len(left) - len(right))


def compare_prerelease(
    left: Optional[Sequence[str]], right: Optional[Sequence[str]]
) -> int:
    """Compare two optional pre-release identifier sequences.

    An absent (or empty) pre-release has higher precedence than any present
    one, so 1.0.0 > 1.0.0-alpha.
    """
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1
    return compare_identifiers(left, right)


def compare_core(
    left: tuple[int, int, int], right: tuple[int, int, int]
) -> int:
    """Three-way numeric comparison of (major, minor, patch) triples."""
    for left_part, right_part in zip(left, right):
        if left_part != right_part:
            return -1 if left_part < right_part else 1
    return 0


class Comparable(ABC):
    """Mixin deriving relational predicates and operators from ``compare_to``.

    ``equal_to`` is precedence equality and may disagree with ``==`` when a
    subclass's equality covers fields that precedence ignores.
    """

    __slots__ = ()

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        """Return a negative, zero or positive int as self sorts before, with or after other."""

    def greater_than(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def greater_than_or_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) >= 0

    def equal_to(self, other: Any) -> bool:
        return self.compare_to(other) == 0

    def less_than(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def less_than_or_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) >= 0
