"""Enumerations for localetag type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they serialize and compare
directly against parsed subtags.

Python 3.13+.
"""

from enum import StrEnum


class ExtensionType(StrEnum):
    """Kind of extension sequence, keyed by its singleton letter.

    StrEnum provides automatic string conversion: str(ExtensionType.UNICODE) == "u"
    """

    TRANSFORM = "t"
    """Transform extension: en-t-ja-m0-ungegn"""

    UNICODE = "u"
    """Unicode locale extension: en-u-ca-buddhist-hc-h12"""

    PRIVATE = "x"
    """Private-use extension: en-x-mycorp"""

    OTHER = "*"
    """Any other singleton letter (forward compatibility): en-a-bbb-ccc"""

    @classmethod
    def from_letter(cls, letter: str) -> "ExtensionType":
        """Map a (lowercase) singleton letter to its extension kind."""
        for member in (cls.TRANSFORM, cls.UNICODE, cls.PRIVATE):
            if member.value == letter:
                return member
        return cls.OTHER


class CharacterDirection(StrEnum):
    """Writing direction derived from script or language.

    StrEnum provides automatic string conversion: str(CharacterDirection.RTL) == "rtl"
    """

    LTR = "ltr"
    """Left to right (Latin, Cyrillic, ...)."""

    RTL = "rtl"
    """Right to left (Arabic, Hebrew, ...)."""

    TTB = "ttb"
    """Top to bottom (traditional Mongolian)."""


class UnicodeExtensionKey(StrEnum):
    """Closed set of Unicode locale extension keys (UTS #35, BCP47 keys).

    Keys outside this enumeration are rejected by the parser and by
    ExtensionsMap.set_unicode_value().
    """

    CALENDAR = "ca"
    CURRENCY_FORMAT = "cf"
    COLLATION = "co"
    CURRENCY = "cu"
    DICTIONARY_BREAK_EXCLUSIONS = "dx"
    EMOJI_PRESENTATION = "em"
    FIRST_DAY = "fw"
    HOUR_CYCLE = "hc"
    COLLATION_ALTERNATE = "ka"
    COLLATION_BACKWARDS = "kb"
    COLLATION_CASE_LEVEL = "kc"
    COLLATION_CASE_FIRST = "kf"
    COLLATION_HIRAGANA_QUATERNARY = "kh"
    COLLATION_NORMALIZATION = "kk"
    COLLATION_NUMERIC = "kn"
    COLLATION_REORDER = "kr"
    COLLATION_STRENGTH = "ks"
    COLLATION_MAX_VARIABLE = "kv"
    LINE_BREAK = "lb"
    LINE_BREAK_WORD = "lw"
    MEASUREMENT_SYSTEM = "ms"
    MEASUREMENT_UNIT = "mu"
    NUMBERING_SYSTEM = "nu"
    REGION_OVERRIDE = "rg"
    SUBDIVISION = "sd"
    SENTENCE_SUPPRESSIONS = "ss"
    TIMEZONE = "tz"
    VARIANT = "va"


__all__ = [
    "CharacterDirection",
    "ExtensionType",
    "UnicodeExtensionKey",
]
