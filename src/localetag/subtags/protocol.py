"""Capability interface the locale layer consumes from a Subtags value.

Locale never inspects a concrete class; any object satisfying this protocol
(LanguageIdentifier, or a test double) can back a Locale.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, Self

from localetag.enums import CharacterDirection

__all__ = ["SubtagsProtocol"]


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class SubtagsProtocol(Protocol):
    """Language, script, region and variants with validating mutators.

    Field attributes hold canonical values: None for an empty language,
    script or region; variants sorted and unique.
    """

    language: str | None
    script: str | None
    region: str | None
    variants: tuple[str, ...]

    def __str__(self) -> str:
        """Canonical text form ('und' when empty)."""
        ...

    def get_language(self) -> str:
        """Language subtag, 'und' when unset."""
        ...

    def set_language(self, language: str | None) -> None:
        """Validate and set language; None clears."""
        ...

    def clear_language(self) -> None:
        """Reset language to 'und'."""
        ...

    def get_script(self) -> str | None:
        """Script subtag or None."""
        ...

    def set_script(self, script: str | None) -> None:
        """Validate and set script; None clears."""
        ...

    def clear_script(self) -> None:
        """Remove the script."""
        ...

    def get_region(self) -> str | None:
        """Region subtag or None."""
        ...

    def set_region(self, region: str | None) -> None:
        """Validate and set region; None clears."""
        ...

    def clear_region(self) -> None:
        """Remove the region."""
        ...

    def get_variants(self) -> tuple[str, ...]:
        """Variants in canonical order."""
        ...

    def set_variants(self, variants: Iterable[str]) -> None:
        """Validate and replace all variants."""
        ...

    def clear_variants(self) -> None:
        """Remove all variants."""
        ...

    def matches(
        self, other: SubtagsProtocol, self_as_range: bool = False, other_as_range: bool = False
    ) -> bool:
        """Range-aware equivalence."""
        ...

    def get_character_direction(self) -> CharacterDirection:
        """Writing direction from script or language."""
        ...

    def add_likely_subtags(self) -> bool:
        """Maximize in place; True if changed."""
        ...

    def remove_likely_subtags(self) -> bool:
        """Minimize in place; True if changed."""
        ...

    def copy(self) -> Self:
        """Independent copy."""
        ...
# pylint: enable=unnecessary-ellipsis
