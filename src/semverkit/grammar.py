# SPDX-License-Identifier: MIT
"""Regular grammar for SemVer 2.0.0 version strings.

Patterns are compiled without anchors and always applied with ``fullmatch``,
so a candidate must match in its entirety (a trailing newline is rejected).
Digits are matched as ASCII ``[0-9]`` only.

https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
"""

from __future__ import annotations

import re
import sys
from typing import Any, Optional

from .errors import ValidationError

# Largest accepted major, minor or patch number
MAX_COMPONENT = sys.maxsize

NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"
ALPHANUMERIC_IDENTIFIER = r"[0-9]*[a-zA-Z-][0-9a-zA-Z-]*"

PRERELEASE_IDENTIFIER = rf"(?:{NUMERIC_IDENTIFIER}|{ALPHANUMERIC_IDENTIFIER})"
BUILD_IDENTIFIER = r"[0-9a-zA-Z-]+"

PRERELEASE_PATTERN = re.compile(rf"{PRERELEASE_IDENTIFIER}(?:\.{PRERELEASE_IDENTIFIER})*")
BUILD_PATTERN = re.compile(rf"{BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*")

PRERELEASE_IDENTIFIER_PATTERN = re.compile(PRERELEASE_IDENTIFIER)
BUILD_IDENTIFIER_PATTERN = re.compile(BUILD_IDENTIFIER)

_METADATA_SUFFIX = (
    rf"(?:-(?P<prerelease>{PRERELEASE_PATTERN.pattern}))?"
    rf"(?:\+(?P<buildmetadata>{BUILD_PATTERN.pattern}))?"
)

# MAJOR.MINOR.PATCH[-prerelease][+build], every numeric component required
SEMVER_PATTERN = re.compile(
    rf"(?P<major>{NUMERIC_IDENTIFIER})"
    rf"\.(?P<minor>{NUMERIC_IDENTIFIER})"
    rf"\.(?P<patch>{NUMERIC_IDENTIFIER})" + _METADATA_SUFFIX
)

# MAJOR[.MINOR[.PATCH]][-prerelease][+build], absent components default to 0
PARTIAL_SEMVER_PATTERN = re.compile(
    rf"(?P<major>{NUMERIC_IDENTIFIER})"
    rf"(?:\.(?P<minor>{NUMERIC_IDENTIFIER}))?"
    rf"(?:\.(?P<patch>{NUMERIC_IDENTIFIER}))?" + _METADATA_SUFFIX
)

_DIGITS = re.compile(r"[0-9]+")


def is_numeric(identifier: str) -> bool:
    """Return True if the identifier consists only of ASCII digits."""
    return _DIGITS.fullmatch(identifier) is not None


def _matches(pattern: re.Pattern[str], text: Any) -> bool:
    if not isinstance(text, str):
        return False
    return pattern.fullmatch(text) is not None


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid strict semantic version.

    Examples:
        >>> is_valid_semver("1.0.0-alpha")
        True
        >>> is_valid_semver("1.0")
        False
    """
    return _matches(SEMVER_PATTERN, version_string)


def is_valid_partial(version_string: str) -> bool:
    """Check if a string is a valid partial version (minor and patch optional).

    Examples:
        >>> is_valid_partial("1.2")
        True
        >>> is_valid_partial("1.2.3.4")
        False
    """
    return _matches(PARTIAL_SEMVER_PATTERN, version_string)


def is_valid_prerelease(prerelease: str) -> bool:
    """Check if a string is a valid dot-separated pre-release field."""
    return _matches(PRERELEASE_PATTERN, prerelease)


def is_valid_build(build: str) -> bool:
    """Check if a string is a valid dot-separated build metadata field."""
    return _matches(BUILD_PATTERN, build)


def _only_if_matches(text: Any, pattern: re.Pattern[str], field: str) -> Optional[str]:
    # Empty may as well be absent, as far as Version is concerned.
    if text is None or text == "":
        return None
    if _matches(pattern, text):
        return text
    raise ValidationError(field, pattern.pattern, text)


def validate_prerelease(prerelease: Optional[str]) -> Optional[str]:
    """Validate a pre-release field.

    Returns:
        The pre-release text, or None when it is None or empty

    Raises:
        ValidationError: If the text does not match the pre-release grammar
    """
    return _only_if_matches(prerelease, PRERELEASE_PATTERN, "prerelease")


def validate_build(build: Optional[str]) -> Optional[str]:
    """Validate a build metadata field.

    Returns:
        The build text, or None when it is None or empty

    Raises:
        ValidationError: If the text does not match the build grammar
    """
    return _only_if_matches(build, BUILD_PATTERN, "build")


def validate_prerelease_identifier(identifier: str) -> str:
    """Validate a single pre-release identifier; empty identifiers are rejected."""
    if _matches(PRERELEASE_IDENTIFIER_PATTERN, identifier):
        return identifier
    raise ValidationError("prerelease", PRERELEASE_IDENTIFIER_PATTERN.pattern, identifier)


def validate_build_identifier(identifier: str) -> str:
    """Validate a single build identifier; empty identifiers are rejected."""
    if _matches(BUILD_IDENTIFIER_PATTERN, identifier):
        return identifier
    raise ValidationError("build", BUILD_IDENTIFIER_PATTERN.pattern, identifier)


def validate_component(value: Any, field: str) -> int:
    """Validate a major, minor or patch number.

    Raises:
        ValidationError: If the value is not an integer in 0..MAX_COMPONENT
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            field, ">= 0", value, f"{field} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(field, ">= 0", value, f"{field} must be non-negative: {value}")
    if value > MAX_COMPONENT:
        raise ValidationError(
            field,
            f"<= {MAX_COMPONENT}",
            value,
            f"{field} must not exceed {MAX_COMPONENT}",
        )
    return value
