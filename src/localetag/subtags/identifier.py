"""LanguageIdentifier: the base subtags of a locale.

A LanguageIdentifier holds language, script, region and variants in
canonical form. Use parse() or from_parts() for validated construction;
the dataclass constructor itself performs no validation and exists for
callers that already hold canonical values (see from_raw_parts_unchecked).
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass

from localetag.constants import SEPARATOR, UNDETERMINED_LANGUAGE
from localetag.core.cursor import Cursor
from localetag.diagnostics import ErrorTemplate, SubtagsError
from localetag.enums import CharacterDirection

from . import likely
from .direction import character_direction
from .matcher import base_matches
from .parser import (
    parse_language,
    parse_language_identifier,
    parse_region,
    parse_script,
    parse_variants,
)
from .protocol import SubtagsProtocol

__all__ = ["LanguageIdentifier"]


@dataclass(slots=True)
class LanguageIdentifier:
    """Language[-script][-region][-variant]* with validating accessors.

    Attributes:
        language: Lowercase language subtag, None for 'und'
        script: Title-case script subtag or None
        region: Upper-case region subtag or None
        variants: Lowercase variants, sorted and unique

    Examples:
        >>> langid = LanguageIdentifier.parse("EN_latn_us")
        >>> str(langid)
        'en-Latn-US'
        >>> langid.set_region(None)
        >>> str(langid)
        'en-Latn'
        >>> str(LanguageIdentifier())
        'und'
    """

    language: str | None = None
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, source: str | bytes) -> LanguageIdentifier:
        """Parse a complete identifier with no extensions.

        Args:
            source: Text such as "en-US" or "sr_Cyrl_RS" (bytes are decoded
                as ASCII)

        Returns:
            Validated LanguageIdentifier

        Raises:
            SubtagsError: If the text is empty, a subtag is invalid, or a
                subtag is left over
            LocaleParserError: If the text is too long or has an empty subtag
        """
        if isinstance(source, bytes):
            source = source.decode("ascii", errors="replace")
        cursor = Cursor.from_text(source)
        result = parse_language_identifier(cursor)
        if not result.cursor.is_eof:
            leftover = result.cursor.current
            raise SubtagsError(ErrorTemplate.unexpected_subtag(leftover.text, leftover.position))
        return result.value

    @classmethod
    def from_bytes(cls, source: bytes) -> LanguageIdentifier:
        """Parse from ASCII bytes. See parse()."""
        return cls.parse(source)

    @classmethod
    def from_parts(
        cls,
        language: str | None = None,
        script: str | None = None,
        region: str | None = None,
        variants: Iterable[str] = (),
    ) -> LanguageIdentifier:
        """Build from explicit parts, validating and canonicalizing each.

        Raises:
            SubtagsError: If any part is invalid

        Example:
            >>> str(LanguageIdentifier.from_parts("PL", None, "pl", ["POSIX"]))
            'pl-PL-posix'
        """
        return cls(
            language=parse_language(language) if language is not None else None,
            script=parse_script(script) if script is not None else None,
            region=parse_region(region) if region is not None else None,
            variants=parse_variants(variants),
        )

    @classmethod
    def from_raw_parts_unchecked(
        cls,
        language: str | None,
        script: str | None,
        region: str | None,
        variants: Iterable[str] | None,
    ) -> LanguageIdentifier:
        """Build without any validation.

        The caller guarantees every part is already canonical (as produced
        by to_raw_parts() of a valid identifier). Invalid input here yields
        an identifier that serializes to invalid text; nothing is reported.
        """
        return cls(language, script, region, tuple(variants or ()))

    def to_raw_parts(self) -> tuple[str | None, str | None, str | None, tuple[str, ...]]:
        """Return (language, script, region, variants) in canonical form."""
        return (self.language, self.script, self.region, self.variants)

    def copy(self) -> LanguageIdentifier:
        """Independent copy."""
        return copy.copy(self)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_language(self) -> str:
        return self.language or UNDETERMINED_LANGUAGE

    def set_language(self, language: str | None) -> None:
        """Set language; None (or 'und') clears it.

        Raises:
            SubtagsError: If language is not a valid language subtag
        """
        self.language = parse_language(language) if language is not None else None

    def clear_language(self) -> None:
        self.language = None

    def get_script(self) -> str | None:
        return self.script

    def set_script(self, script: str | None) -> None:
        """Set script; None clears it.

        Raises:
            SubtagsError: If script is not a valid script subtag
        """
        self.script = parse_script(script) if script is not None else None

    def clear_script(self) -> None:
        self.script = None

    def get_region(self) -> str | None:
        return self.region

    def set_region(self, region: str | None) -> None:
        """Set region; None clears it.

        Raises:
            SubtagsError: If region is not a valid region subtag
        """
        self.region = parse_region(region) if region is not None else None

    def clear_region(self) -> None:
        self.region = None

    def get_variants(self) -> tuple[str, ...]:
        return self.variants

    def set_variants(self, variants: Iterable[str]) -> None:
        """Replace all variants; an empty iterable clears them.

        Variants are validated first, so a failure leaves the current
        variants untouched.

        Raises:
            SubtagsError: If any variant is invalid
        """
        self.variants = parse_variants(variants)

    def clear_variants(self) -> None:
        self.variants = ()

    # ------------------------------------------------------------------
    # Comparison and derived data
    # ------------------------------------------------------------------

    def matches(
        self,
        other: SubtagsProtocol,
        self_as_range: bool = False,
        other_as_range: bool = False,
    ) -> bool:
        """Range-aware equivalence; empty fields of a range match anything."""
        return base_matches(self, other, self_as_range, other_as_range)

    def get_character_direction(self) -> CharacterDirection:
        return character_direction(self.language, self.script)

    def add_likely_subtags(self) -> bool:
        """Maximize in place from CLDR data (requires Babel).

        Returns:
            True if language, script or region changed
        """
        return likely.add_likely_subtags(self)

    def remove_likely_subtags(self) -> bool:
        """Minimize in place from CLDR data (requires Babel).

        Returns:
            True if language, script or region changed
        """
        return likely.remove_likely_subtags(self)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        parts = [self.get_language()]
        if self.script is not None:
            parts.append(self.script)
        if self.region is not None:
            parts.append(self.region)
        parts.extend(self.variants)
        return SEPARATOR.join(parts)
