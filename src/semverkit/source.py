# SPDX-License-Identifier: MIT
"""Generic ordering of arbitrary objects by their associated version."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, TypeVar, Union, runtime_checkable

from .compare import version_key
from .version import Version, parse_strict_or_fail


@runtime_checkable
class VersionSource(Protocol):
    """Anything that exposes a ``version()`` accessor.

    ``Version`` itself satisfies the protocol, returning itself.
    """

    def version(self) -> Version: ...


T = TypeVar("T", bound=Union[VersionSource, Version, str])


def version_of(item: Union[VersionSource, Version, str]) -> Version:
    """Resolve a Version, a VersionSource or a strict version string to a Version.

    Raises:
        ParseError: If a string is not a valid strict version
        TypeError: If the item has no associated version
    """
    if isinstance(item, Version):
        return item
    if isinstance(item, str):
        return parse_strict_or_fail(item)
    if isinstance(item, VersionSource):
        resolved = item.version()
        if not isinstance(resolved, Version):
            raise TypeError(
                f"{type(item).__name__}.version() returned {type(resolved).__name__}, not Version"
            )
        return resolved
    raise TypeError(f"{type(item).__name__} does not provide a version")


def by_version(item: Union[VersionSource, Version, str]) -> tuple:
    """Sort key ordering items by the precedence of their versions."""
    return version_key(version_of(item))


def sort_by_version(items: Iterable[T], reverse: bool = False) -> list[T]:
    """Return the items sorted by version precedence.

    The sort is stable, so items whose versions are equivalent keep their
    relative order.
    """
    return sorted(items, key=by_version, reverse=reverse)


def latest(items: Iterable[T]) -> Optional[T]:
    """Return the item with the highest version precedence, or None if empty."""
    return max(items, key=by_version, default=None)
