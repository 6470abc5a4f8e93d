"""Unified subtag validation for locale grammar.

This module provides the single source of truth for subtag charset and
length rules, so the parsers and the programmatic setters accept exactly
the same inputs.

Grammar (UTS #35 unicode_locale_id, ASCII only):
    language   = alpha{2,3} | alpha{5,8}
    script     = alpha{4}
    region     = alpha{2} | digit{3}
    variant    = alphanum{5,8} | digit alphanum{3}
    singleton  = alpha
    ukey       = alphanum alpha
    attribute  = alphanum{3,8}
    type       = alphanum{3,8}
    tkey       = alpha digit
    private    = alphanum{1,8}
    other      = alphanum{2,8}

Python's str.isalpha()/isalnum() accept non-ASCII letters, so every rule is
a compiled ASCII-only regex.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re

from localetag.constants import (
    ATTRIBUTE_RANGE,
    KEY_LENGTH,
    LANGUAGE_LONG_RANGE,
    LANGUAGE_SHORT_RANGE,
    OTHER_RANGE,
    PRIVATE_RANGE,
    SCRIPT_LENGTH,
    TYPE_RANGE,
    VARIANT_RANGE,
)

__all__ = [
    "is_attribute",
    "is_extension_singleton",
    "is_language_subtag",
    "is_other_subtag",
    "is_private_subtag",
    "is_region_subtag",
    "is_script_subtag",
    "is_transform_key",
    "is_type_subtag",
    "is_unicode_key",
    "is_variant_subtag",
]

_ALPHA = "[a-zA-Z]"
_DIGIT = "[0-9]"
_ALNUM = "[a-zA-Z0-9]"


def _repeat(charset: str, bounds: tuple[int, int]) -> str:
    return f"{charset}{{{bounds[0]},{bounds[1]}}}"


_LANGUAGE_PATTERN: re.Pattern[str] = re.compile(
    f"{_repeat(_ALPHA, LANGUAGE_SHORT_RANGE)}|{_repeat(_ALPHA, LANGUAGE_LONG_RANGE)}"
)
_SCRIPT_PATTERN: re.Pattern[str] = re.compile(f"{_ALPHA}{{{SCRIPT_LENGTH}}}")
_REGION_PATTERN: re.Pattern[str] = re.compile(f"{_ALPHA}{{2}}|{_DIGIT}{{3}}")
_VARIANT_PATTERN: re.Pattern[str] = re.compile(
    f"{_repeat(_ALNUM, VARIANT_RANGE)}|{_DIGIT}{_ALNUM}{{3}}"
)
_SINGLETON_PATTERN: re.Pattern[str] = re.compile(_ALPHA)
_UNICODE_KEY_PATTERN: re.Pattern[str] = re.compile(f"{_ALNUM}{_ALPHA}")
_ATTRIBUTE_PATTERN: re.Pattern[str] = re.compile(_repeat(_ALNUM, ATTRIBUTE_RANGE))
_TYPE_PATTERN: re.Pattern[str] = re.compile(_repeat(_ALNUM, TYPE_RANGE))
_TRANSFORM_KEY_PATTERN: re.Pattern[str] = re.compile(f"{_ALPHA}{_DIGIT}")
_PRIVATE_PATTERN: re.Pattern[str] = re.compile(_repeat(_ALNUM, PRIVATE_RANGE))
_OTHER_PATTERN: re.Pattern[str] = re.compile(_repeat(_ALNUM, OTHER_RANGE))


def is_language_subtag(subtag: str) -> bool:
    """Check language subtag: alpha{2,3} | alpha{5,8}.

    Example:
        >>> is_language_subtag("en"), is_language_subtag("und"), is_language_subtag("engl")
        (True, True, False)
    """
    return _LANGUAGE_PATTERN.fullmatch(subtag) is not None


def is_script_subtag(subtag: str) -> bool:
    """Check script subtag: alpha{4}."""
    return _SCRIPT_PATTERN.fullmatch(subtag) is not None


def is_region_subtag(subtag: str) -> bool:
    """Check region subtag: alpha{2} | digit{3}.

    Example:
        >>> is_region_subtag("US"), is_region_subtag("419"), is_region_subtag("m0")
        (True, True, False)
    """
    return _REGION_PATTERN.fullmatch(subtag) is not None


def is_variant_subtag(subtag: str) -> bool:
    """Check variant subtag: alphanum{5,8} | digit alphanum{3}.

    Example:
        >>> is_variant_subtag("macos"), is_variant_subtag("1996"), is_variant_subtag("abcd")
        (True, True, False)
    """
    return _VARIANT_PATTERN.fullmatch(subtag) is not None


def is_extension_singleton(subtag: str) -> bool:
    """Check extension singleton: a single ASCII letter."""
    return _SINGLETON_PATTERN.fullmatch(subtag) is not None


def is_unicode_key(subtag: str) -> bool:
    """Check unicode keyword shape: alphanum alpha (e.g. 'hc', 'd0' is not)."""
    return _UNICODE_KEY_PATTERN.fullmatch(subtag) is not None


def is_attribute(subtag: str) -> bool:
    """Check unicode attribute: alphanum{3,8}."""
    return _ATTRIBUTE_PATTERN.fullmatch(subtag) is not None


def is_type_subtag(subtag: str) -> bool:
    """Check unicode/transform value subtag: alphanum{3,8}."""
    return _TYPE_PATTERN.fullmatch(subtag) is not None


def is_transform_key(subtag: str) -> bool:
    """Check transform field key: alpha digit (e.g. 'm0', 'h0')."""
    return len(subtag) == KEY_LENGTH and _TRANSFORM_KEY_PATTERN.fullmatch(subtag) is not None


def is_private_subtag(subtag: str) -> bool:
    """Check private-use subtag: alphanum{1,8}."""
    return _PRIVATE_PATTERN.fullmatch(subtag) is not None


def is_other_subtag(subtag: str) -> bool:
    """Check other-extension subtag: alphanum{2,8}."""
    return _OTHER_PATTERN.fullmatch(subtag) is not None
