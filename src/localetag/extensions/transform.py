"""Transform extension ('t'): source language plus mechanical transform fields."""

from __future__ import annotations

from dataclasses import dataclass, field

from localetag.constants import INPUT_SEPARATORS, SEPARATOR
from localetag.core.validation import is_transform_key, is_type_subtag
from localetag.diagnostics import ErrorTemplate, LocaleParserError
from localetag.enums import ExtensionType
from localetag.subtags import LanguageIdentifier

__all__ = ["TransformExtension", "normalize_field"]


def normalize_field(key: str, value: str, position: int | None = None) -> tuple[str, str]:
    """Validate a transform field and return its canonical (key, value).

    Keys are alpha digit; values are one or more alphanum{3,8} subtags.

    Raises:
        LocaleParserError: If key or value is malformed

    Example:
        >>> normalize_field("M0", "UNGEGN")
        ('m0', 'ungegn')
    """
    if not is_transform_key(key):
        raise LocaleParserError(ErrorTemplate.invalid_field_key(key, position))
    lowered = value.lower()
    for separator in INPUT_SEPARATORS:
        lowered = lowered.replace(separator, SEPARATOR)
    if not all(is_type_subtag(subtag) for subtag in lowered.split(SEPARATOR)):
        raise LocaleParserError(ErrorTemplate.invalid_field_value(key, value, position))
    return key.lower(), lowered


@dataclass(slots=True)
class TransformExtension:
    """Source locale the content was transformed from, and transform fields.

    Attributes:
        tlang: Source language identifier, if given
        fields: Field key -> canonical value

    Example:
        >>> ext = TransformExtension()
        >>> ext.set_tlang("ja")
        >>> ext.set_field("m0", "ungegn")
        >>> str(ext)
        't-ja-m0-ungegn'
    """

    tlang: LanguageIdentifier | None = None
    fields: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return self.tlang is None and not self.fields

    def set_tlang(self, tlang: LanguageIdentifier | str | None) -> None:
        """Set the source language; text is parsed, None clears.

        Raises:
            SubtagsError: If tlang text is not a valid language identifier
        """
        if isinstance(tlang, str):
            tlang = LanguageIdentifier.parse(tlang)
        self.tlang = tlang

    def get_field(self, key: str) -> str:
        """Value of a field.

        Raises:
            KeyError: If the field is not set
        """
        return self.fields[key.lower()]

    def set_field(self, key: str, value: str) -> None:
        """Insert or overwrite a field.

        Raises:
            LocaleParserError: If key or value is malformed
        """
        canonical_key, canonical_value = normalize_field(key, value)
        self.fields[canonical_key] = canonical_value

    def remove_field(self, key: str) -> bool:
        """Remove a field. Returns True if it was present."""
        return self.fields.pop(key.lower(), None) is not None

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        parts: list[str] = [ExtensionType.TRANSFORM.value]
        if self.tlang is not None:
            parts.append(str(self.tlang))
        for key in sorted(self.fields):
            parts.append(key)
            parts.append(self.fields[key])
        return SEPARATOR.join(parts)
