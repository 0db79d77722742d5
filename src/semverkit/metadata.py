# SPDX-License-Identifier: MIT
"""Dot-separated identifier sequences used for pre-release and build fields."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

from .errors import ValidationError
from .precedence import Comparable, compare_identifiers

MetadataLike = Union["VersionMetadata", str, Iterable[str], None]


@dataclass(frozen=True, slots=True)
class VersionMetadata(Comparable):
    """An ordered, immutable sequence of identifiers.

    An empty sequence is equivalent to an absent field and is falsy. The
    identifiers themselves are not checked here; ``Version`` validates them
    against the pre-release or build grammar depending on the field.
    """

    identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        identifiers = tuple(self.identifiers)
        for identifier in identifiers:
            if not isinstance(identifier, str):
                raise ValidationError(
                    "identifier",
                    "str",
                    identifier,
                    f"Identifiers must be strings, got {type(identifier).__name__}",
                )
        object.__setattr__(self, "identifiers", identifiers)

    @classmethod
    def of(cls, identifiers: Iterable[str]) -> VersionMetadata:
        metadata = cls(tuple(identifiers))
        return EMPTY if not metadata.identifiers else metadata

    @classmethod
    def parse(cls, text: Optional[str]) -> VersionMetadata:
        """Split dot-separated text into identifiers; None and "" yield EMPTY."""
        if not text:
            return EMPTY
        return cls.of(text.split("."))

    @classmethod
    def coerce(cls, value: MetadataLike) -> VersionMetadata:
        """Accept a VersionMetadata, dotted text, an identifier iterable or None."""
        if value is None:
            return EMPTY
        if isinstance(value, VersionMetadata):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Iterable):
            return cls.of(value)
        raise ValidationError(
            "metadata",
            "str | Iterable[str]",
            value,
            f"Metadata must be a string or an iterable of strings, got {type(value).__name__}",
        )

    @property
    def is_empty(self) -> bool:
        return not self.identifiers

    @property
    def is_present(self) -> bool:
        return bool(self.identifiers)

    def __bool__(self) -> bool:
        return bool(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)

    def __getitem__(self, index: int) -> str:
        return self.identifiers[index]

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def compare_to(self, other: VersionMetadata) -> int:
        return compare_identifiers(self.identifiers, other.identifiers)

    def to_builder(self) -> MetadataBuilder:
        return MetadataBuilder(self)


EMPTY = VersionMetadata()


class MetadataBuilder:
    """Appends identifiers to a copy of an existing sequence.

    Example:
        >>> str(MetadataBuilder().then("beta").then(2).build())
        'beta.2'
    """

    def __init__(self, seed: Optional[VersionMetadata] = None):
        self._identifiers: list[str] = list(seed.identifiers) if seed is not None else []

    def then(self, identifier: Union[str, int]) -> MetadataBuilder:
        if isinstance(identifier, bool) or not isinstance(identifier, (str, int)):
            raise ValidationError(
                "identifier",
                "str | int",
                identifier,
                f"Identifiers must be strings or integers, got {type(identifier).__name__}",
            )
        self._identifiers.append(str(identifier))
        return self

    def build(self) -> VersionMetadata:
        return VersionMetadata.of(self._identifiers)
