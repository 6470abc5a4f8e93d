"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Subtag errors (language, script, region, variants)
        2000-2999: Parser errors (tokenization, extension grammar)
        3000-3999: Extension value errors (programmatic mutation)
    """

    # Subtag errors (1000-1999)
    INVALID_LANGUAGE = 1001
    INVALID_SCRIPT = 1002
    INVALID_REGION = 1003
    INVALID_VARIANT = 1004

    # Parser errors (2000-2999)
    INPUT_TOO_LONG = 2001
    EMPTY_SUBTAG = 2002
    INVALID_SUBTAG = 2003
    UNEXPECTED_SUBTAG = 2004
    EMPTY_EXTENSION = 2005
    DUPLICATE_EXTENSION = 2006
    DUPLICATE_KEYWORD = 2007
    DUPLICATE_ATTRIBUTE = 2008
    DUPLICATE_FIELD = 2009
    DUPLICATE_PRIVATE = 2010

    # Extension value errors (3000-3999)
    UNKNOWN_KEY = 3001
    INVALID_KEY_VALUE = 3002
    INVALID_ATTRIBUTE = 3004
    INVALID_FIELD_KEY = 3005
    INVALID_FIELD_VALUE = 3006
    INVALID_PRIVATE = 3007
    INVALID_EXTENSION_LETTER = 3008
    INVALID_OTHER_VALUE = 3009
    AMBIGUOUS_PRIVATE = 3010


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of an offending subtag inside the input text.

    Locale tags are single-line, so only character offsets are tracked.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to point
    at the offending subtag of a locale tag.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location of the offending subtag (None for programmatic input)
        subtag: The offending subtag text, if any
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    subtag: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[DUPLICATE_KEYWORD]: Duplicate unicode extension keyword 'hc'
              --> characters 12..14
              = help: Each keyword may appear once per unicode extension

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
