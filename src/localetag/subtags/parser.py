"""Grammar for the base subtags: language[-script][-region][-variant]*.

Each field parser validates one subtag and returns its canonical casing:

    language  -> lowercase, 'und' -> None
    script    -> Titlecase
    region    -> UPPERCASE (digits unchanged)
    variant   -> lowercase

parse_language_identifier() consumes the longest valid head from a cursor
and hands back the remainder, so the same routine serves full tags, locale
heads (followed by extensions) and the transform extension's source tag.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from localetag.constants import UNDETERMINED_LANGUAGE
from localetag.core.cursor import Cursor, ParseResult
from localetag.core.validation import (
    is_language_subtag,
    is_region_subtag,
    is_script_subtag,
    is_variant_subtag,
)
from localetag.diagnostics import ErrorTemplate, SubtagsError

if TYPE_CHECKING:
    from .identifier import LanguageIdentifier

__all__ = [
    "parse_language",
    "parse_language_identifier",
    "parse_region",
    "parse_script",
    "parse_variant",
    "parse_variants",
]


def parse_language(subtag: str, position: int | None = None) -> str | None:
    """Validate a language subtag; 'und' maps to None.

    Raises:
        SubtagsError: If subtag is not alpha{2,3} | alpha{5,8}

    Example:
        >>> parse_language("EN")
        'en'
        >>> parse_language("und") is None
        True
    """
    if not is_language_subtag(subtag):
        raise SubtagsError(ErrorTemplate.invalid_language(subtag, position))
    lowered = subtag.lower()
    if lowered == UNDETERMINED_LANGUAGE:
        return None
    return lowered


def parse_script(subtag: str, position: int | None = None) -> str:
    """Validate a script subtag and title-case it.

    Raises:
        SubtagsError: If subtag is not alpha{4}
    """
    if not is_script_subtag(subtag):
        raise SubtagsError(ErrorTemplate.invalid_script(subtag, position))
    return subtag.title()


def parse_region(subtag: str, position: int | None = None) -> str:
    """Validate a region subtag and upper-case it.

    Raises:
        SubtagsError: If subtag is not alpha{2} | digit{3}
    """
    if not is_region_subtag(subtag):
        raise SubtagsError(ErrorTemplate.invalid_region(subtag, position))
    return subtag.upper()


def parse_variant(subtag: str, position: int | None = None) -> str:
    """Validate a variant subtag and lower-case it.

    Raises:
        SubtagsError: If subtag is not alphanum{5,8} | digit alphanum{3}
    """
    if not is_variant_subtag(subtag):
        raise SubtagsError(ErrorTemplate.invalid_variant(subtag, position))
    return subtag.lower()


def parse_variants(variants: Iterable[str]) -> tuple[str, ...]:
    """Validate variants and return them sorted and de-duplicated.

    Example:
        >>> parse_variants(["POSIX", "macos", "posix"])
        ('macos', 'posix')
    """
    return tuple(sorted({parse_variant(variant) for variant in variants}))


def parse_language_identifier(cursor: Cursor) -> ParseResult[LanguageIdentifier]:
    """Parse language[-script][-region][-variant]* from the cursor.

    Consumption stops at the first subtag that cannot continue the head
    (an extension singleton, a transform field key, or anything else); the
    caller decides whether leftover subtags are legal.

    Args:
        cursor: Cursor positioned on the language subtag

    Returns:
        ParseResult with the identifier and the cursor after its last subtag

    Raises:
        SubtagsError: If the first subtag is missing or not a language subtag
    """
    from .identifier import LanguageIdentifier  # noqa: PLC0415 - circular

    if cursor.is_eof:
        raise SubtagsError(ErrorTemplate.invalid_language(""))

    first = cursor.current
    language = parse_language(first.text, first.position)
    cursor = cursor.advance()

    script: str | None = None
    region: str | None = None
    variants: list[str] = []

    # Slots fill strictly left to right: script, then region, then variants.
    slot = 0
    while not cursor.is_eof:
        text = cursor.current.text
        if slot == 0 and is_script_subtag(text):
            script = text.title()
            slot = 1
        elif slot <= 1 and is_region_subtag(text):
            region = text.upper()
            slot = 2
        elif is_variant_subtag(text):
            variants.append(text.lower())
            slot = 2
        else:
            break
        cursor = cursor.advance()

    langid = LanguageIdentifier(
        language=language,
        script=script,
        region=region,
        variants=tuple(sorted(set(variants))),
    )
    return ParseResult(langid, cursor)
