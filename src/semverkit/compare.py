# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Union

from .grammar import is_numeric
from .version import Version, parse_strict_or_fail


def _as_version(version: Union[str, Version]) -> Version:
    return parse_strict_or_fail(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (strict version string or Version object)
        version2: Second version (strict version string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    return _as_version(version1).compare_to(_as_version(version2))


def _identifier_key(identifier: str) -> tuple[int, int, str]:
    # Numeric identifiers sort before alphanumeric ones, by length then digits
    if is_numeric(identifier):
        return (0, len(identifier), identifier)
    return (1, 0, identifier)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with ``compare_versions``.

    Args:
        version: Strict version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # A release sorts after every pre-release of the same core;
    # a shorter identifier tuple sorts before any longer one it prefixes.
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part) for part in v.prerelease))

    return (v.major, v.minor, v.patch, prerelease_key)
