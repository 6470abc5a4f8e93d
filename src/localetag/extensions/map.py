"""ExtensionsMap: every extension sequence of one locale.

Holds at most one instance of each extension kind, exposes validating
setters, and serializes in canonical order:

    t, u, other letters (a..z), x

Each sub-collection validates with the same helpers the parser uses, so a
map built programmatically equals one parsed from the same text.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field

from localetag.constants import SEPARATOR
from localetag.core.validation import is_extension_singleton, is_other_subtag
from localetag.diagnostics import ErrorTemplate, LocaleParserError
from localetag.enums import ExtensionType
from localetag.subtags import LanguageIdentifier

from .private import PrivateExtension
from .transform import TransformExtension
from .unicode import UnicodeExtension

__all__ = ["ExtensionsMap", "normalize_other"]


def normalize_other(
    letter: str, values: Iterable[str], positions: Iterable[int | None] | None = None
) -> tuple[str, tuple[str, ...]]:
    """Validate an 'other' extension and return (letter, values) lowercased.

    Raises:
        LocaleParserError: If letter is not a singleton outside t/u/x, the
            value list is empty, or a value is not alphanum{2,8}
    """
    lowered_letter = letter.lower()
    if (
        not is_extension_singleton(letter)
        or ExtensionType.from_letter(lowered_letter) is not ExtensionType.OTHER
    ):
        raise LocaleParserError(ErrorTemplate.invalid_extension_letter(letter))

    offsets = list(positions) if positions is not None else None
    canonical: list[str] = []
    for index, value in enumerate(values):
        if not is_other_subtag(value):
            position = offsets[index] if offsets is not None else None
            raise LocaleParserError(ErrorTemplate.invalid_other_value(letter, value, position))
        canonical.append(value.lower())
    if not canonical:
        raise LocaleParserError(ErrorTemplate.empty_extension(letter))
    return lowered_letter, tuple(canonical)


@dataclass(slots=True)
class ExtensionsMap:
    """Extension sequences of a locale.

    Attributes:
        unicode: The 'u' extension
        transform: The 't' extension
        private: The 'x' extension
        other: Singleton letter -> subtags for any other extension

    Examples:
        >>> extensions = ExtensionsMap()
        >>> extensions.is_empty(), str(extensions)
        (True, '')
        >>> extensions.set_private_value("foo")
        >>> extensions.set_unicode_value("hc", "h12")
        >>> str(extensions)
        'u-hc-h12-x-foo'
    """

    unicode: UnicodeExtension = field(default_factory=UnicodeExtension)
    transform: TransformExtension = field(default_factory=TransformExtension)
    private: PrivateExtension = field(default_factory=PrivateExtension)
    other: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def parse(cls, source: str) -> ExtensionsMap:
        """Parse an extension tail such as "u-hc-h12-x-foo".

        Empty text yields an empty map.

        Raises:
            LocaleParserError: If the tail is malformed
        """
        from .parser import parse_extensions  # noqa: PLC0415 - circular

        return parse_extensions(source)

    def is_empty(self) -> bool:
        """True iff no extension sequence is present."""
        return (
            self.unicode.is_empty()
            and self.transform.is_empty()
            and self.private.is_empty()
            and not self.other
        )

    def __bool__(self) -> bool:
        return not self.is_empty()

    def copy(self) -> ExtensionsMap:
        """Deep, independent copy."""
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Unicode extension
    # ------------------------------------------------------------------

    def get_unicode_value(self, key: str) -> str | None:
        """Value of a keyword (None if value-less).

        Raises:
            KeyError: If the keyword is not set
            LocaleParserError: If key is not a known keyword
        """
        return self.unicode.get_value(key)

    def set_unicode_value(self, key: str, value: str | None = None) -> None:
        """Insert or overwrite a keyword; None marks it value-less.

        Raises:
            LocaleParserError: If key is unknown or value breaks the key's rule
        """
        self.unicode.set_value(key, value)

    def remove_unicode_value(self, key: str) -> bool:
        """Remove a keyword. Returns True if it was present."""
        return self.unicode.remove_value(key)

    def set_unicode_attribute(self, attribute: str) -> None:
        """Add a standalone attribute.

        Raises:
            LocaleParserError: If attribute is not alphanum{3,8}
        """
        self.unicode.set_attribute(attribute)

    def remove_unicode_attribute(self, attribute: str) -> bool:
        """Remove a standalone attribute. Returns True if it was present."""
        return self.unicode.remove_attribute(attribute)

    # ------------------------------------------------------------------
    # Transform extension
    # ------------------------------------------------------------------

    def set_transform_lang(self, tlang: LanguageIdentifier | str | None) -> None:
        """Set (or with None, clear) the transformed-from language.

        Raises:
            SubtagsError: If tlang text is not a valid language identifier
        """
        self.transform.set_tlang(tlang)

    def set_transform_field(self, key: str, value: str) -> None:
        """Insert or overwrite a transform field.

        Raises:
            LocaleParserError: If key is not alpha digit or value is malformed
        """
        self.transform.set_field(key, value)

    def remove_transform_field(self, key: str) -> bool:
        """Remove a transform field. Returns True if it was present."""
        return self.transform.remove_field(key)

    # ------------------------------------------------------------------
    # Private-use extension
    # ------------------------------------------------------------------

    def set_private_value(self, token: str, value: str | None = None) -> None:  # noqa: ARG002
        """Add a private-use token.

        value mirrors set_unicode_value()'s signature and is ignored:
        private-use tokens carry no value.

        Raises:
            LocaleParserError: If token is malformed or already present
        """
        self.private.add(token)

    def remove_private_value(self, token: str) -> bool:
        """Remove a private-use token. Returns True if it was present."""
        return self.private.remove(token)

    # ------------------------------------------------------------------
    # Other extensions
    # ------------------------------------------------------------------

    def get_other_values(self, letter: str) -> tuple[str, ...]:
        """Subtags of another extension.

        Raises:
            KeyError: If the extension is not present
        """
        return self.other[letter.lower()]

    def set_other_values(self, letter: str, values: Iterable[str]) -> None:
        """Replace the subtags of another extension.

        Raises:
            LocaleParserError: If letter is t/u/x or not a letter, values is
                empty, or a value is not alphanum{2,8}
        """
        canonical_letter, canonical_values = normalize_other(letter, values)
        self.other[canonical_letter] = canonical_values

    def remove_other(self, letter: str) -> bool:
        """Remove another extension. Returns True if it was present."""
        return self.other.pop(letter.lower(), None) is not None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        sequences = [str(self.transform), str(self.unicode)]
        sequences.extend(
            SEPARATOR.join((letter, *self.other[letter])) for letter in sorted(self.other)
        )
        sequences.append(str(self.private))
        return SEPARATOR.join(sequence for sequence in sequences if sequence)
