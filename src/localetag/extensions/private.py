"""Private-use extension ('x'): application-defined tokens."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from localetag.constants import SEPARATOR
from localetag.core.validation import is_extension_singleton, is_private_subtag
from localetag.diagnostics import ErrorTemplate, LocaleParserError
from localetag.enums import ExtensionType

__all__ = ["PrivateExtension", "normalize_private"]

_MISSING = object()


def normalize_private(token: str, position: int | None = None) -> str:
    """Validate a private-use token (alphanum{1,8}) and lowercase it.

    Raises:
        LocaleParserError: If token has the wrong length or charset
    """
    if not is_private_subtag(token):
        raise LocaleParserError(ErrorTemplate.invalid_private(token, position))
    return token.lower()


@dataclass(slots=True)
class PrivateExtension:
    """Unique private-use tokens.

    Tokens keep insertion order (a dict used as an ordered set) but
    serialize sorted, and equality ignores order. At most one token may be
    a single letter; it serializes first so the text parses back to the
    same tokens.

    Example:
        >>> ext = PrivateExtension()
        >>> ext.add("zeta")
        >>> ext.add("Alpha")
        >>> list(ext), str(ext)
        (['zeta', 'alpha'], 'x-alpha-zeta')
    """

    tokens: dict[str, None] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.lower() in self.tokens

    def add(self, token: str, position: int | None = None) -> None:
        """Add a token.

        Raises:
            LocaleParserError: If token is malformed, already present, or a
                second single-letter token
        """
        canonical = normalize_private(token, position)
        if canonical in self.tokens:
            raise LocaleParserError(ErrorTemplate.duplicate_private(token, position))
        if is_extension_singleton(canonical) and any(map(is_extension_singleton, self.tokens)):
            raise LocaleParserError(ErrorTemplate.ambiguous_private(token, position))
        self.tokens[canonical] = None

    def remove(self, token: str) -> bool:
        """Remove a token. Returns True if it was present."""
        return self.tokens.pop(token.lower(), _MISSING) is not _MISSING

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        ordered = sorted(self.tokens, key=lambda token: (not is_extension_singleton(token), token))
        return SEPARATOR.join([ExtensionType.PRIVATE.value, *ordered])

