"""Locale: base subtags plus extension sequences.

A Locale pairs a Subtags value (language, script, region, variants) with an
ExtensionsMap. Text is parsed in two phases over one subtag cursor:

    1. the base subtags head (parse_language_identifier)
    2. every remaining subtag as extension sequences (parse_extensions_from_cursor)

Either phase failing fails the whole parse; no partial Locale is returned.

Field accessors delegate to the Subtags value and let its SubtagsError
propagate unchanged. Extensions are manipulated directly through
``locale.extensions``.

Python 3.13+. Babel is optional (likely subtags only).
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TypeAlias

from localetag.constants import MAX_CANONICAL_CACHE_SIZE, SEPARATOR
from localetag.core.cursor import Cursor
from localetag.diagnostics import ErrorTemplate, LocaleParserError, SubtagsError
from localetag.enums import CharacterDirection
from localetag.extensions import ExtensionsMap, parse_extensions_from_cursor
from localetag.subtags import (
    LanguageIdentifier,
    SubtagsProtocol,
    base_matches,
    parse_language_identifier,
)

__all__ = ["Locale", "canonicalize"]

logger = logging.getLogger(__name__)

RawParts: TypeAlias = tuple[str | None, str | None, str | None, tuple[str, ...], str]


@dataclass(slots=True)
class Locale:
    """A locale identifier with extensions.

    Equality is structural: two locales are equal when their base subtags
    and their extension contents are equal, regardless of the order in which
    extensions were written or added.

    Attributes:
        langid: Base subtags
        extensions: Extension sequences

    Examples:
        >>> locale = Locale.parse("en-x-foo-u-hc-h12")
        >>> str(locale)
        'en-u-hc-h12-x-foo'
        >>> locale.extensions.get_unicode_value("hc")
        'h12'
        >>> locale.set_region("us")
        >>> str(locale)
        'en-US-u-hc-h12-x-foo'
    """

    langid: SubtagsProtocol = field(default_factory=LanguageIdentifier)
    extensions: ExtensionsMap = field(default_factory=ExtensionsMap)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, source: str | bytes) -> Locale:
        """Parse locale text such as "de-Latn-AT-u-ca-buddhist".

        Both '-' and '_' separate subtags; subtags are case-insensitive.

        Args:
            source: Locale text (bytes are decoded as ASCII)

        Returns:
            Validated Locale

        Raises:
            LocaleParserError: If the text is empty, too long, or any subtag
                of the head or of the extensions is malformed
        """
        if isinstance(source, bytes):
            source = source.decode("ascii", errors="replace")
        try:
            return cls._parse_text(source)
        except LocaleParserError as e:
            logger.debug("Rejected locale text %r: %s", source, e)
            raise

    @classmethod
    def _parse_text(cls, source: str) -> Locale:
        cursor = Cursor.from_text(source)
        if cursor.is_eof:
            raise LocaleParserError(ErrorTemplate.empty_subtag(0))

        try:
            head = parse_language_identifier(cursor)
        except SubtagsError as e:
            raise LocaleParserError(e.diagnostic or str(e)) from e

        extensions = parse_extensions_from_cursor(head.cursor)
        return cls(head.value, extensions)

    @classmethod
    def from_bytes(cls, source: bytes) -> Locale:
        """Parse from ASCII bytes. See parse()."""
        return cls.parse(source)

    @classmethod
    def from_parts(
        cls,
        language: str | None = None,
        script: str | None = None,
        region: str | None = None,
        variants: Iterable[str] = (),
        extensions: ExtensionsMap | None = None,
    ) -> Locale:
        """Build from explicit base parts and an optional pre-built map.

        Raises:
            SubtagsError: If any base part is invalid

        Example:
            >>> str(Locale.from_parts("sr", "cyrl", "rs"))
            'sr-Cyrl-RS'
        """
        langid = LanguageIdentifier.from_parts(language, script, region, variants)
        return cls(langid, extensions if extensions is not None else ExtensionsMap())

    @classmethod
    def from_parts_unchecked(
        cls,
        language: str | None = None,
        script: str | None = None,
        region: str | None = None,
        variants: Iterable[str] = (),
        extensions: ExtensionsMap | None = None,
    ) -> Locale:
        """Build without validating the base parts.

        The caller guarantees every part is already canonical. Invalid input
        yields a Locale that serializes to invalid text; nothing is reported.
        """
        if extensions is None:
            extensions = ExtensionsMap()
        return cls.from_raw_parts_unchecked(language, script, region, variants, extensions)

    @classmethod
    def from_raw_parts_unchecked(
        cls,
        language: str | None,
        script: str | None,
        region: str | None,
        variants: Iterable[str] | None,
        extensions: ExtensionsMap,
    ) -> Locale:
        """Rebuild from canonical parts without validation.

        Counterpart of to_raw_parts() for the base subtags; the extensions
        are taken as an already-built map.
        """
        langid = LanguageIdentifier.from_raw_parts_unchecked(language, script, region, variants)
        return cls(langid, extensions)

    @classmethod
    def from_langid(cls, langid: SubtagsProtocol) -> Locale:
        """Wrap a Subtags value in a Locale with no extensions."""
        return cls(langid, ExtensionsMap())

    def to_langid(self) -> SubtagsProtocol:
        """Independent copy of the base subtags, dropping extensions."""
        return self.langid.copy()

    def to_raw_parts(self) -> RawParts:
        """Return (language, script, region, variants, extensions text)."""
        return (
            self.langid.language,
            self.langid.script,
            self.langid.region,
            self.langid.variants,
            str(self.extensions),
        )

    def copy(self) -> Locale:
        """Deep, independent copy."""
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def matches(
        self,
        other: Locale | SubtagsProtocol,
        self_as_range: bool = False,
        other_as_range: bool = False,
    ) -> bool:
        """Range-aware comparison of base subtags.

        Locales carrying private-use tokens never match anything. Other
        extensions are ignored.

        Args:
            other: Locale or bare Subtags value
            self_as_range: Treat empty fields of self as wildcards
            other_as_range: Treat empty fields of other as wildcards

        Example:
            >>> en, en_us = Locale.parse("en"), Locale.parse("en-US")
            >>> en.matches(en_us, True, False), en.matches(en_us)
            (True, False)
        """
        if isinstance(other, Locale) and not other.extensions.private.is_empty():
            return False
        if not self.extensions.private.is_empty():
            return False
        return base_matches(self.langid, other, self_as_range, other_as_range)

    # ------------------------------------------------------------------
    # Base subtag accessors
    # ------------------------------------------------------------------

    # Read-only field views so a Locale can stand in for its base subtags,
    # e.g. LanguageIdentifier.matches(locale).

    @property
    def language(self) -> str | None:
        return self.langid.language

    @property
    def script(self) -> str | None:
        return self.langid.script

    @property
    def region(self) -> str | None:
        return self.langid.region

    @property
    def variants(self) -> tuple[str, ...]:
        return self.langid.variants

    def get_language(self) -> str:
        return self.langid.get_language()

    def set_language(self, language: str | None) -> None:
        """Set language; None (or 'und') clears it.

        Raises:
            SubtagsError: If language is invalid
        """
        self.langid.set_language(language)

    def clear_language(self) -> None:
        self.langid.clear_language()

    def get_script(self) -> str | None:
        return self.langid.get_script()

    def set_script(self, script: str | None) -> None:
        """Set script; None clears it.

        Raises:
            SubtagsError: If script is invalid
        """
        self.langid.set_script(script)

    def clear_script(self) -> None:
        self.langid.clear_script()

    def get_region(self) -> str | None:
        return self.langid.get_region()

    def set_region(self, region: str | None) -> None:
        """Set region; None clears it.

        Raises:
            SubtagsError: If region is invalid
        """
        self.langid.set_region(region)

    def clear_region(self) -> None:
        self.langid.clear_region()

    def get_variants(self) -> tuple[str, ...]:
        return self.langid.get_variants()

    def set_variants(self, variants: Iterable[str] | None) -> None:
        """Replace all variants; None or an empty iterable clears them.

        Raises:
            SubtagsError: If any variant is invalid
        """
        self.langid.set_variants(variants or ())

    def clear_variants(self) -> None:
        self.langid.clear_variants()

    # ------------------------------------------------------------------
    # Derived data
    # ------------------------------------------------------------------

    def get_character_direction(self) -> CharacterDirection:
        return self.langid.get_character_direction()

    def add_likely_subtags(self) -> bool:
        """Maximize the base subtags in place; extensions are untouched.

        Raises:
            BabelImportError: If Babel is not installed
        """
        return self.langid.add_likely_subtags()

    def remove_likely_subtags(self) -> bool:
        """Minimize the base subtags in place; extensions are untouched.

        Raises:
            BabelImportError: If Babel is not installed
        """
        return self.langid.remove_likely_subtags()

    def __str__(self) -> str:
        if self.extensions.is_empty():
            return str(self.langid)
        return f"{self.langid}{SEPARATOR}{self.extensions}"


@lru_cache(maxsize=MAX_CANONICAL_CACHE_SIZE)
def canonicalize(source: str) -> str:
    """Parse locale text and return its canonical form.

    Results are cached; failures are not.

    Raises:
        LocaleParserError: If the text is not a valid locale

    Example:
        >>> canonicalize("EN_us-X-Foo-U-HC-H12")
        'en-US-u-hc-h12-x-foo'
    """
    return str(Locale.parse(source))
