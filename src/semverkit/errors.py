# SPDX-License-Identifier: MIT
"""Exceptions raised while constructing or parsing versions."""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base class for all semverkit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(VersionError):
    """Raised when a version component or metadata field is invalid.

    Attributes:
        field: Name of the offending field (e.g. "major", "prerelease")
        pattern: The expected pattern, or a short description of the constraint
        value: The rejected value
    """

    def __init__(self, field: str, pattern: str, value: Any, message: str = ""):
        self.field = field
        self.pattern = pattern
        self.value = value
        super().__init__(
            message
            or f"{field} must match pattern: `{pattern}` but received invalid input: {value!r}"
        )


class ParseError(VersionError):
    """Raised when text does not match a version grammar in its entirety."""

    def __init__(self, pattern_name: str, input: Any, message: str = ""):
        self.pattern_name = pattern_name
        self.input = input
        super().__init__(
            message
            or f"Version must match the {pattern_name} pattern but received invalid input: {input!r}"
        )
