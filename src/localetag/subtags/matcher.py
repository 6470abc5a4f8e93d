"""Range-aware equivalence of base subtags.

When an identifier is treated as a range, each of its empty fields acts as
a wildcard:

    >>> from localetag.subtags import LanguageIdentifier
    >>> en = LanguageIdentifier.parse("en")
    >>> en_us = LanguageIdentifier.parse("en-US")
    >>> base_matches(en, en_us, True, False)
    True
    >>> base_matches(en, en_us, False, False)
    False
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .protocol import SubtagsProtocol

__all__ = ["base_matches", "subtag_matches"]


FieldValue: TypeAlias = str | None | tuple[str, ...]


def subtag_matches(
    first: FieldValue, second: FieldValue, first_as_range: bool, second_as_range: bool
) -> bool:
    """Compare one field, honouring wildcard semantics for empty ranges."""
    return (
        (first_as_range and _is_empty(first))
        or (second_as_range and _is_empty(second))
        or first == second
    )


def _is_empty(value: FieldValue) -> bool:
    if value is None:
        return True
    return len(value) == 0


def base_matches(
    first: SubtagsProtocol,
    second: SubtagsProtocol,
    first_as_range: bool,
    second_as_range: bool,
) -> bool:
    """Field-wise match of language, script, region and variants.

    Args:
        first: Left identifier
        second: Right identifier
        first_as_range: Treat empty fields of first as wildcards
        second_as_range: Treat empty fields of second as wildcards

    Returns:
        True if every field matches
    """
    return (
        subtag_matches(first.language, second.language, first_as_range, second_as_range)
        and subtag_matches(first.script, second.script, first_as_range, second_as_range)
        and subtag_matches(first.region, second.region, first_as_range, second_as_range)
        and subtag_matches(first.variants, second.variants, first_as_range, second_as_range)
    )
