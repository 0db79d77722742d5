# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 values, parsing, and precedence.

This package provides an immutable ``Version`` value type with validated
construction, strict and partial parsing, and comparison following the
SemVer 2.0.0 precedence rules.

Example:
    >>> from semverkit import Version, parse, parse_strict_or_fail
    >>> version = parse_strict_or_fail("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version.prerelease)
    'alpha.1'
    >>> str(parse("1.2"))
    '1.2.0'
    >>> Version.of(1, 0, 0) > Version.of(1, 0, 0, "rc.1")
    True
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    ValidationError,
    ParseError,
)
from .grammar import (
    SEMVER_PATTERN,
    PARTIAL_SEMVER_PATTERN,
    PRERELEASE_PATTERN,
    BUILD_PATTERN,
    is_valid_semver,
    is_valid_partial,
    is_valid_prerelease,
    is_valid_build,
)
from .precedence import (
    Comparable,
    compare_identifiers,
    compare_prerelease,
)
from .core import (
    MAX_COMPONENT,
    CoreBuilder,
    VersionCore,
)
from .metadata import (
    MetadataBuilder,
    VersionMetadata,
)
from .version import (
    Version,
    VersionBuilder,
    parse,
    parse_or_fail,
    parse_strict,
    parse_strict_or_fail,
)
from .compare import (
    compare_versions,
    version_key,
)
from .source import (
    VersionSource,
    by_version,
    latest,
    sort_by_version,
    version_of,
)

__all__ = [
    # Errors
    "VersionError",
    "ValidationError",
    "ParseError",
    # Grammar
    "SEMVER_PATTERN",
    "PARTIAL_SEMVER_PATTERN",
    "PRERELEASE_PATTERN",
    "BUILD_PATTERN",
    "is_valid_semver",
    "is_valid_partial",
    "is_valid_prerelease",
    "is_valid_build",
    # Precedence
    "Comparable",
    "compare_identifiers",
    "compare_prerelease",
    # Value types
    "MAX_COMPONENT",
    "VersionCore",
    "CoreBuilder",
    "VersionMetadata",
    "MetadataBuilder",
    "Version",
    "VersionBuilder",
    # Parsing
    "parse",
    "parse_or_fail",
    "parse_strict",
    "parse_strict_or_fail",
    # Version comparison
    "compare_versions",
    "version_key",
    # Version sources
    "VersionSource",
    "by_version",
    "latest",
    "sort_by_version",
    "version_of",
]
