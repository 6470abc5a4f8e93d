"""Immutable cursor infrastructure for subtag-level parsing.

Locale text is tokenized once into positioned subtags; every grammar layer
(base subtags, each extension kind) then walks the same immutable cursor.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Each subtag keeps its character offset for error spans

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from localetag.constants import INPUT_SEPARATORS, MAX_INPUT_LENGTH
from localetag.diagnostics import ErrorTemplate, LocaleParserError

__all__ = ["Cursor", "ParseResult", "Subtag", "tokenize"]


@dataclass(frozen=True, slots=True)
class Subtag:
    """One separator-delimited token and its offset in the source text.

    Attributes:
        text: Subtag characters as written (case preserved)
        position: Character offset of the first character
    """

    text: str
    position: int

    def __len__(self) -> int:
        return len(self.text)


def tokenize(source: str) -> tuple[Subtag, ...]:
    """Split locale text into positioned subtags.

    Both '-' and '_' are accepted as separators. An empty source yields an
    empty tuple; empty subtags between separators are rejected.

    Args:
        source: Locale text (or an extension tail)

    Returns:
        Tuple of Subtag in source order

    Raises:
        LocaleParserError: If source exceeds MAX_INPUT_LENGTH or contains an
            empty subtag (doubled, leading or trailing separator)

    Example:
        >>> [s.text for s in tokenize("en_US-u-hc-h12")]
        ['en', 'US', 'u', 'hc', 'h12']
        >>> tokenize("en-US")[1].position
        3
    """
    if len(source) > MAX_INPUT_LENGTH:
        raise LocaleParserError(ErrorTemplate.input_too_long(len(source), MAX_INPUT_LENGTH))
    if not source:
        return ()

    subtags: list[Subtag] = []
    start = 0
    for index, char in enumerate(source):
        if char in INPUT_SEPARATORS:
            if index == start:
                raise LocaleParserError(ErrorTemplate.empty_subtag(index))
            subtags.append(Subtag(source[start:index], start))
            start = index + 1
    if start == len(source):
        raise LocaleParserError(ErrorTemplate.empty_subtag(start))
    subtags.append(Subtag(source[start:], start))
    return tuple(subtags)


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position over a tokenized subtag sequence.

    Example:
        >>> cursor = Cursor(tokenize("en-US"))
        >>> cursor.current.text
        'en'
        >>> cursor.advance().current.text
        'US'
        >>> cursor.current.text  # Original unchanged (immutability)
        'en'
        >>> cursor.advance(2).is_eof
        True
    """

    subtags: tuple[Subtag, ...]
    pos: int = 0

    @classmethod
    def from_text(cls, source: str) -> "Cursor":
        """Tokenize source and return a cursor at its first subtag."""
        return cls(tokenize(source))

    @property
    def is_eof(self) -> bool:
        """True when every subtag has been consumed."""
        return self.pos >= len(self.subtags)

    @property
    def current(self) -> Subtag:
        """Subtag at the cursor.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of input at subtag {self.pos}"
            raise EOFError(msg)
        return self.subtags[self.pos]

    def peek(self, offset: int = 0) -> Subtag | None:
        """Subtag at pos + offset without advancing, or None beyond EOF."""
        target = self.pos + offset
        if target >= len(self.subtags):
            return None
        return self.subtags[target]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count subtags (clamped at EOF)."""
        return Cursor(self.subtags, min(self.pos + count, len(self.subtags)))

    def remainder(self) -> tuple[Subtag, ...]:
        """Unconsumed subtags from the cursor onward."""
        return self.subtags[self.pos :]


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Every grammar function has the signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo]: ...
    and raises LocaleParserError (or SubtagsError) on malformed input.
    """

    value: T
    cursor: Cursor
