"""Extension grammar: tokenize an extension tail into an ExtensionsMap.

    extensions = (singleton subtag+)*

A single ASCII letter opens a sequence; every following subtag up to the
next single letter (or the end) belongs to it. Dispatch is by
ExtensionType, done once per sequence:

    u  attributes and keyword[-value] pairs
    t  [tlang] (tkey value+)*
    x  private-use tokens
    *  any other letter: subtags kept verbatim

Parsing is all-or-nothing: a fresh ExtensionsMap is filled and returned only
when every subtag is valid; any error raises LocaleParserError.
"""

from __future__ import annotations

import logging

from localetag.core.cursor import Cursor, Subtag
from localetag.core.validation import (
    is_attribute,
    is_extension_singleton,
    is_language_subtag,
    is_type_subtag,
)
from localetag.diagnostics import ErrorTemplate, LocaleParserError
from localetag.enums import ExtensionType
from localetag.subtags import parse_language_identifier

from .keys import KEY_SPECS, normalize_value, resolve_key
from .map import ExtensionsMap, normalize_other
from .private import PrivateExtension
from .transform import TransformExtension, normalize_field
from .unicode import UnicodeExtension, normalize_attribute

__all__ = ["parse_extensions", "parse_extensions_from_cursor"]

logger = logging.getLogger(__name__)


def parse_extensions(source: str) -> ExtensionsMap:
    """Parse extension text such as "u-hc-h12-x-foo".

    Raises:
        LocaleParserError: If the text is malformed
    """
    try:
        return parse_extensions_from_cursor(Cursor.from_text(source))
    except LocaleParserError as e:
        logger.debug("Rejected extension text %r: %s", source, e)
        raise


def parse_extensions_from_cursor(cursor: Cursor) -> ExtensionsMap:
    """Parse every remaining subtag of cursor as extension sequences.

    Args:
        cursor: Cursor on the first singleton (or at EOF for no extensions)

    Returns:
        Fully populated ExtensionsMap

    Raises:
        LocaleParserError: On a non-singleton where a sequence must start,
            a repeated singleton, an empty sequence, or any invalid subtag
    """
    extensions = ExtensionsMap()
    seen: set[str] = set()

    while not cursor.is_eof:
        singleton = cursor.current
        if not is_extension_singleton(singleton.text):
            raise LocaleParserError(
                ErrorTemplate.unexpected_subtag(singleton.text, singleton.position)
            )
        letter = singleton.text.lower()
        if letter in seen:
            raise LocaleParserError(
                ErrorTemplate.duplicate_extension(singleton.text, singleton.position)
            )
        seen.add(letter)

        cursor = cursor.advance()
        body = _take_sequence(cursor, letter)
        if not body:
            raise LocaleParserError(
                ErrorTemplate.empty_extension(singleton.text, singleton.position)
            )
        cursor = cursor.advance(len(body))

        match ExtensionType.from_letter(letter):
            case ExtensionType.UNICODE:
                _parse_unicode(Cursor(body), extensions.unicode)
            case ExtensionType.TRANSFORM:
                _parse_transform(Cursor(body), extensions.transform)
            case ExtensionType.PRIVATE:
                _parse_private(body, extensions.private)
            case ExtensionType.OTHER:
                _, values = normalize_other(
                    letter,
                    (subtag.text for subtag in body),
                    (subtag.position for subtag in body),
                )
                extensions.other[letter] = values

    return extensions


def _take_sequence(cursor: Cursor, letter: str) -> tuple[Subtag, ...]:
    """Subtags from cursor up to (not including) the next singleton.

    A private-use sequence always owns its first subtag, so "x-a" is the
    token "a" rather than an empty sequence followed by extension "a".
    """
    body: list[Subtag] = []
    if letter == ExtensionType.PRIVATE and not cursor.is_eof:
        body.append(cursor.current)
        cursor = cursor.advance()
    while not cursor.is_eof and not is_extension_singleton(cursor.current.text):
        body.append(cursor.current)
        cursor = cursor.advance()
    return tuple(body)


def _parse_unicode(cursor: Cursor, unicode: UnicodeExtension) -> None:
    while not cursor.is_eof:
        subtag = cursor.current
        if len(subtag) == 2:
            key = resolve_key(subtag.text, subtag.position)
            if key in unicode.keywords:
                raise LocaleParserError(
                    ErrorTemplate.duplicate_keyword(subtag.text, subtag.position)
                )
            spec = KEY_SPECS[key]
            cursor = cursor.advance()

            value_subtags: list[Subtag] = []
            while not cursor.is_eof and spec.accepts(
                len(value_subtags), cursor.current.text.lower()
            ):
                value_subtags.append(cursor.current)
                cursor = cursor.advance()

            # No accepted value: the keyword is value-less and the next
            # subtag is read fresh (as a keyword or an attribute).
            if value_subtags:
                first = value_subtags[0]
                text = "-".join(value.text for value in value_subtags)
                unicode.keywords[key] = normalize_value(key, text, first.position)
            else:
                unicode.keywords[key] = None
        elif is_attribute(subtag.text):
            attribute = normalize_attribute(subtag.text, subtag.position)
            if attribute in unicode.attributes:
                raise LocaleParserError(
                    ErrorTemplate.duplicate_attribute(subtag.text, subtag.position)
                )
            unicode.attributes.add(attribute)
            cursor = cursor.advance()
        else:
            raise LocaleParserError(ErrorTemplate.invalid_subtag(subtag.text, subtag.position))


def _parse_transform(cursor: Cursor, transform: TransformExtension) -> None:
    if is_language_subtag(cursor.current.text):
        result = parse_language_identifier(cursor)
        transform.tlang = result.value
        cursor = result.cursor

    while not cursor.is_eof:
        key = cursor.current
        cursor = cursor.advance()

        value_subtags: list[Subtag] = []
        while not cursor.is_eof and is_type_subtag(cursor.current.text):
            value_subtags.append(cursor.current)
            cursor = cursor.advance()

        text = "-".join(value.text for value in value_subtags)
        canonical_key, canonical_value = normalize_field(key.text, text, key.position)
        if canonical_key in transform.fields:
            raise LocaleParserError(ErrorTemplate.duplicate_field(key.text, key.position))
        transform.fields[canonical_key] = canonical_value


def _parse_private(body: tuple[Subtag, ...], private: PrivateExtension) -> None:
    for subtag in body:
        private.add(subtag.text, subtag.position)
