"""Unicode locale extension ('u'): attributes and keyword/value pairs."""

from __future__ import annotations

from dataclasses import dataclass, field

from localetag.constants import SEPARATOR
from localetag.core.validation import is_attribute
from localetag.diagnostics import ErrorTemplate, LocaleParserError
from localetag.enums import ExtensionType, UnicodeExtensionKey

from .keys import normalize_value, resolve_key

__all__ = ["UnicodeExtension", "normalize_attribute"]

_MISSING = object()


def normalize_attribute(attribute: str, position: int | None = None) -> str:
    """Validate an attribute (alphanum{3,8}) and lowercase it.

    Raises:
        LocaleParserError: If attribute has the wrong length or charset
    """
    if not is_attribute(attribute):
        raise LocaleParserError(ErrorTemplate.invalid_attribute(attribute, position))
    return attribute.lower()


@dataclass(slots=True)
class UnicodeExtension:
    """Keywords and attributes of a 'u' extension.

    Equality ignores insertion order: keywords compare as mappings and
    attributes as sets.

    Attributes:
        keywords: Keyword -> canonical value (None for value-less keywords)
        attributes: Standalone attributes

    Example:
        >>> ext = UnicodeExtension()
        >>> ext.set_value("hc", "h12")
        >>> ext.set_attribute("foo")
        >>> str(ext)
        'u-foo-hc-h12'
    """

    keywords: dict[UnicodeExtensionKey, str | None] = field(default_factory=dict)
    attributes: set[str] = field(default_factory=set)

    def is_empty(self) -> bool:
        return not self.keywords and not self.attributes

    def get_value(self, key: str) -> str | None:
        """Value of key (None when value-less).

        Raises:
            KeyError: If key is not set
            LocaleParserError: If key is not a known keyword
        """
        return self.keywords[resolve_key(key)]

    def set_value(self, key: str, value: str | None = None) -> None:
        """Insert or overwrite a keyword after validating its value.

        Raises:
            LocaleParserError: If key is unknown or value breaks its rule
        """
        resolved = resolve_key(key)
        self.keywords[resolved] = normalize_value(resolved, value)

    def remove_value(self, key: str) -> bool:
        """Remove a keyword. Returns True if it was present."""
        return self.keywords.pop(resolve_key(key), _MISSING) is not _MISSING

    def set_attribute(self, attribute: str) -> None:
        """Add an attribute; adding an existing one is a no-op.

        Raises:
            LocaleParserError: If attribute is not alphanum{3,8}
        """
        self.attributes.add(normalize_attribute(attribute))

    def remove_attribute(self, attribute: str) -> bool:
        """Remove an attribute. Returns True if it was present."""
        lowered = attribute.lower()
        if lowered in self.attributes:
            self.attributes.remove(lowered)
            return True
        return False

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        parts: list[str] = [ExtensionType.UNICODE.value]
        parts.extend(sorted(self.attributes))
        for key in sorted(self.keywords):
            parts.append(key.value)
            value = self.keywords[key]
            if value is not None:
                parts.append(value)
        return SEPARATOR.join(parts)

