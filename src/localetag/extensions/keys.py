"""Unicode extension key table and the shared keyword validator.

Every key in UnicodeExtensionKey has a KeySpec describing how many type
subtags its value may have and an optional closed set of values. Any key may
appear without a value. The parser and ExtensionsMap setters both
go through resolve_key() and normalize_value(), so they accept exactly the
same keywords.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from localetag.constants import INPUT_SEPARATORS, SEPARATOR
from localetag.core.validation import is_type_subtag, is_unicode_key
from localetag.diagnostics import ErrorTemplate, LocaleParserError
from localetag.enums import UnicodeExtensionKey

__all__ = ["KEY_SPECS", "KeySpec", "normalize_value", "resolve_key"]


@dataclass(frozen=True, slots=True)
class KeySpec:
    """Value rule for one unicode extension key.

    Attributes:
        key: The keyword
        max_subtags: Maximum number of type subtags in the value
        values: Closed set of allowed values, or None for any type subtag
    """

    key: UnicodeExtensionKey
    max_subtags: int = 1
    values: frozenset[str] | None = None

    def accepts(self, index: int, subtag: str) -> bool:
        """Whether subtag can be the index-th subtag of this key's value."""
        if index >= self.max_subtags or not is_type_subtag(subtag):
            return False
        return self.values is None or subtag in self.values


_BOOLEAN = frozenset({"true", "false"})

_K = UnicodeExtensionKey

KEY_SPECS: MappingProxyType[UnicodeExtensionKey, KeySpec] = MappingProxyType({
    spec.key: spec
    for spec in (
        KeySpec(_K.CALENDAR, max_subtags=3),
        KeySpec(_K.CURRENCY_FORMAT, values=frozenset({"standard", "account"})),
        KeySpec(_K.COLLATION),
        KeySpec(_K.CURRENCY),
        KeySpec(_K.DICTIONARY_BREAK_EXCLUSIONS, max_subtags=8),
        KeySpec(_K.EMOJI_PRESENTATION, values=frozenset({"emoji", "text", "default"})),
        KeySpec(
            _K.FIRST_DAY,
            values=frozenset({"sun", "mon", "tue", "wed", "thu", "fri", "sat"}),
        ),
        KeySpec(_K.HOUR_CYCLE, values=frozenset({"h11", "h12", "h23", "h24"})),
        KeySpec(_K.COLLATION_ALTERNATE, values=frozenset({"noignore", "shifted"})),
        KeySpec(_K.COLLATION_BACKWARDS, values=_BOOLEAN),
        KeySpec(_K.COLLATION_CASE_LEVEL, values=_BOOLEAN),
        KeySpec(_K.COLLATION_CASE_FIRST, values=frozenset({"upper", "lower", "false"})),
        KeySpec(_K.COLLATION_HIRAGANA_QUATERNARY, values=_BOOLEAN),
        KeySpec(_K.COLLATION_NORMALIZATION, values=_BOOLEAN),
        KeySpec(_K.COLLATION_NUMERIC, values=_BOOLEAN),
        KeySpec(_K.COLLATION_REORDER, max_subtags=8),
        KeySpec(
            _K.COLLATION_STRENGTH,
            values=frozenset({"level1", "level2", "level3", "level4", "identic"}),
        ),
        KeySpec(
            _K.COLLATION_MAX_VARIABLE,
            values=frozenset({"space", "punct", "symbol", "currency"}),
        ),
        KeySpec(_K.LINE_BREAK, values=frozenset({"strict", "normal", "loose"})),
        KeySpec(
            _K.LINE_BREAK_WORD,
            values=frozenset({"normal", "breakall", "keepall", "phrase"}),
        ),
        KeySpec(_K.MEASUREMENT_SYSTEM, values=frozenset({"metric", "ussystem", "uksystem"})),
        KeySpec(_K.MEASUREMENT_UNIT, values=frozenset({"celsius", "kelvin", "fahrenhe"})),
        KeySpec(_K.NUMBERING_SYSTEM),
        KeySpec(_K.REGION_OVERRIDE),
        KeySpec(_K.SUBDIVISION),
        KeySpec(_K.SENTENCE_SUPPRESSIONS, values=frozenset({"none", "standard"})),
        KeySpec(_K.TIMEZONE),
        KeySpec(_K.VARIANT),
    )
})


def resolve_key(key: str, position: int | None = None) -> UnicodeExtensionKey:
    """Map keyword text (any case) to its UnicodeExtensionKey.

    Raises:
        LocaleParserError: If key is not alphanum alpha, or not a known key

    Example:
        >>> resolve_key("HC")
        <UnicodeExtensionKey.HOUR_CYCLE: 'hc'>
    """
    if isinstance(key, UnicodeExtensionKey):
        return key
    if not is_unicode_key(key):
        raise LocaleParserError(ErrorTemplate.invalid_subtag(key, position))
    try:
        return UnicodeExtensionKey(key.lower())
    except ValueError as e:
        raise LocaleParserError(ErrorTemplate.unknown_key(key, position)) from e


def normalize_value(
    key: UnicodeExtensionKey, value: str | None, position: int | None = None
) -> str | None:
    """Validate a keyword value against the key's rule and lowercase it.

    Multi-subtag values may use '-' or '_' between subtags; the result
    always uses '-'.

    Args:
        key: Resolved keyword
        value: Value text, or None for a value-less keyword
        position: Character offset for diagnostics, if parsed

    Returns:
        Canonical value, or None for a value-less keyword

    Raises:
        LocaleParserError: If any subtag breaks the key's value rule

    Example:
        >>> normalize_value(UnicodeExtensionKey.CALENDAR, "Islamic_Civil")
        'islamic-civil'
        >>> normalize_value(UnicodeExtensionKey.HOUR_CYCLE, None) is None
        True
    """
    if value is None:
        return None

    spec = KEY_SPECS[key]
    lowered = value.lower()
    for separator in INPUT_SEPARATORS:
        lowered = lowered.replace(separator, SEPARATOR)
    subtags = lowered.split(SEPARATOR)
    if not all(spec.accepts(index, subtag) for index, subtag in enumerate(subtags)):
        raise LocaleParserError(ErrorTemplate.invalid_key_value(key, value, position))
    return lowered
