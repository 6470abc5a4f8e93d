"""Locale exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "LocaleError",
    "LocaleParserError",
    "SubtagsError",
]


class LocaleError(ValueError):
    """Base exception for all locale errors.

    Subclasses ValueError so callers validating user input can catch the
    builtin type.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, when the error carries a diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None

    @property
    def subtag(self) -> str | None:
        """Offending subtag, when known."""
        return self.diagnostic.subtag if self.diagnostic is not None else None


class LocaleParserError(LocaleError):
    """Malformed locale or extension input.

    Raised for bad subtag length or charset, duplicate extension letters,
    keywords, attributes, fields or private-use tokens, unknown unicode keys
    and unexpected end of input. Parsing is all-or-nothing: no partially
    built Locale is ever returned.
    """


class SubtagsError(LocaleError):
    """Invalid language, script, region or variant subtag.

    Raised by the subtags layer (LanguageIdentifier) and propagated unchanged
    by the Locale field setters.
    """
