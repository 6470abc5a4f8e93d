"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span(subtag: str, position: int | None) -> SourceSpan | None:
    """Build the span covering subtag when its offset is known."""
    if position is None:
        return None
    return SourceSpan(start=position, end=position + len(subtag))


class ErrorTemplate:
    """Centralized error message templates.

    Messages are built here, never at the raise site: callers pass a
    Diagnostic from one of these factories to the exception constructor.
    Every template takes the offending subtag and, when the error comes from
    parsing, its character offset in the input (None for programmatic input).
    """

    # =========================================================================
    # SUBTAG ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def invalid_language(subtag: str, position: int | None = None) -> Diagnostic:
        """Language subtag fails alpha{2,3} | alpha{5,8}.

        Args:
            subtag: The rejected language subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_LANGUAGE
        """
        msg = f"Invalid language subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE,
            message=msg,
            span=_span(subtag, position),
            subtag=subtag,
            hint="Language subtags are 2-3 or 5-8 ASCII letters, or 'und'",
        )

    @staticmethod
    def invalid_script(subtag: str, position: int | None = None) -> Diagnostic:
        """Script subtag is not exactly four ASCII letters.

        Args:
            subtag: The rejected script subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_SCRIPT
        """
        msg = f"Invalid script subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SCRIPT,
            message=msg,
            span=_span(subtag, position),
            subtag=subtag,
            hint="Script subtags are exactly 4 ASCII letters (ISO 15924)",
        )

    @staticmethod
    def invalid_region(subtag: str, position: int | None = None) -> Diagnostic:
        """Region subtag is neither alpha{2} nor digit{3}.

        Args:
            subtag: The rejected region subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_REGION
        """
        msg = f"Invalid region subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REGION,
            message=msg,
            span=_span(subtag, position),
            subtag=subtag,
            hint="Region subtags are 2 ASCII letters (ISO 3166-1) or 3 digits (UN M.49)",
        )

    @staticmethod
    def invalid_variant(subtag: str, position: int | None = None) -> Diagnostic:
        """Variant subtag fails alphanum{5,8} | digit alphanum{3}.

        Args:
            subtag: The rejected variant subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_VARIANT
        """
        msg = f"Invalid variant subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VARIANT,
            message=msg,
            span=_span(subtag, position),
            subtag=subtag,
            hint="Variants are 5-8 alphanumerics, or 4 starting with a digit",
        )

    # =========================================================================
    # PARSER ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def input_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds MAX_INPUT_LENGTH.

        Args:
            length: Actual input length
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LONG
        """
        msg = f"Locale text of {length} characters exceeds the limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LONG,
            message=msg,
            hint="Locale identifiers are short; check the input source",
        )

    @staticmethod
    def empty_subtag(position: int) -> Diagnostic:
        """Two separators in a row, or a leading/trailing separator.

        Args:
            position: Character offset where the empty subtag sits

        Returns:
            Diagnostic for EMPTY_SUBTAG
        """
        msg = f"Empty subtag at position {position}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SUBTAG,
            message=msg,
            span=SourceSpan(start=position, end=position),
            subtag="",
            hint="Remove the doubled, leading or trailing separator",
        )

    @staticmethod
    def invalid_subtag(subtag: str, position: int | None = None) -> Diagnostic:
        """Subtag has a disallowed character or length.

        Args:
            subtag: The rejected subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_SUBTAG
        """
        msg = f"Invalid subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SUBTAG,
            message=msg,
            span=_span(subtag, position),
            subtag=subtag,
            hint="Subtags are 1-8 ASCII alphanumeric characters",
        )

    @staticmethod
    def unexpected_subtag(subtag: str, position: int | None = None) -> Diagnostic:
        """Subtag that fits no slot of the grammar at its position.

        Args:
            subtag: The rejected subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for UNEXPECTED_SUBTAG
        """
        msg = f"Unexpected subtag '{subtag}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_SUBTAG,
            message=msg,
            span=_span(subtag, position),
            subtag=subtag,
            hint="Expected script, region, variant or an extension singleton",
        )

    @staticmethod
    def empty_extension(letter: str, position: int | None = None) -> Diagnostic:
        """Extension singleton with no subtags after it.

        Args:
            letter: The extension singleton
            position: Character offset of the singleton, if parsed

        Returns:
            Diagnostic for EMPTY_EXTENSION
        """
        msg = f"Extension '{letter}' has no subtags (unexpected end of input)"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_EXTENSION,
            message=msg,
            span=_span(letter, position),
            subtag=letter,
            hint="An extension singleton must be followed by at least one subtag",
        )

    @staticmethod
    def duplicate_extension(letter: str, position: int | None = None) -> Diagnostic:
        """Extension singleton appears twice.

        Args:
            letter: The repeated singleton
            position: Character offset of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_EXTENSION
        """
        msg = f"Duplicate extension '{letter}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_EXTENSION,
            message=msg,
            span=_span(letter, position),
            subtag=letter,
            hint="Each extension singleton may appear once per locale",
        )

    @staticmethod
    def duplicate_keyword(key: str, position: int | None = None) -> Diagnostic:
        """Unicode keyword appears twice.

        Args:
            key: The repeated keyword
            position: Character offset of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_KEYWORD
        """
        msg = f"Duplicate unicode extension keyword '{key}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_KEYWORD,
            message=msg,
            span=_span(key, position),
            subtag=key,
            hint="Each keyword may appear once per unicode extension",
        )

    @staticmethod
    def duplicate_attribute(attribute: str, position: int | None = None) -> Diagnostic:
        """Unicode attribute appears twice.

        Args:
            attribute: The repeated attribute
            position: Character offset of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_ATTRIBUTE
        """
        msg = f"Duplicate unicode extension attribute '{attribute}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ATTRIBUTE,
            message=msg,
            span=_span(attribute, position),
            subtag=attribute,
        )

    @staticmethod
    def duplicate_field(key: str, position: int | None = None) -> Diagnostic:
        """Transform field key appears twice.

        Args:
            key: The repeated field key
            position: Character offset of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_FIELD
        """
        msg = f"Duplicate transform extension field '{key}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_FIELD,
            message=msg,
            span=_span(key, position),
            subtag=key,
        )

    @staticmethod
    def duplicate_private(token: str, position: int | None = None) -> Diagnostic:
        """Private-use token appears twice.

        Args:
            token: The repeated token
            position: Character offset of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_PRIVATE
        """
        msg = f"Duplicate private-use subtag '{token}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_PRIVATE,
            message=msg,
            span=_span(token, position),
            subtag=token,
        )

    # =========================================================================
    # EXTENSION VALUE ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unknown_key(key: str, position: int | None = None) -> Diagnostic:
        """Unicode keyword outside the closed key enumeration.

        Args:
            key: The unrecognized key
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for UNKNOWN_KEY
        """
        msg = f"Unknown unicode extension key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEY,
            message=msg,
            span=_span(key, position),
            subtag=key,
            hint="See UnicodeExtensionKey for the supported keys",
        )

    @staticmethod
    def invalid_key_value(key: str, value: str, position: int | None = None) -> Diagnostic:
        """Value rejected by the key's value rule.

        Args:
            key: The unicode keyword
            value: The rejected value
            position: Character offset of the value, if parsed

        Returns:
            Diagnostic for INVALID_KEY_VALUE
        """
        msg = f"Invalid value '{value}' for unicode extension key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY_VALUE,
            message=msg,
            span=_span(value, position),
            subtag=value,
        )

    @staticmethod
    def invalid_attribute(attribute: str, position: int | None = None) -> Diagnostic:
        """Unicode attribute fails alphanum{3,8}.

        Args:
            attribute: The rejected attribute
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_ATTRIBUTE
        """
        msg = f"Invalid unicode extension attribute '{attribute}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE,
            message=msg,
            span=_span(attribute, position),
            subtag=attribute,
            hint="Attributes are 3-8 ASCII alphanumeric characters",
        )

    @staticmethod
    def invalid_field_key(key: str, position: int | None = None) -> Diagnostic:
        """Transform field key fails alpha digit.

        Args:
            key: The rejected field key
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_FIELD_KEY
        """
        msg = f"Invalid transform extension field key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FIELD_KEY,
            message=msg,
            span=_span(key, position),
            subtag=key,
            hint="Field keys are one ASCII letter followed by one digit (e.g. m0)",
        )

    @staticmethod
    def invalid_field_value(key: str, value: str, position: int | None = None) -> Diagnostic:
        """Transform field value missing or malformed.

        Args:
            key: The field key
            value: The rejected value ("" when missing)
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_FIELD_VALUE
        """
        msg = f"Invalid value '{value}' for transform extension field '{key}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FIELD_VALUE,
            message=msg,
            span=_span(value or key, position),
            subtag=value or key,
            hint="Field values are one or more 3-8 alphanumeric subtags",
        )

    @staticmethod
    def invalid_private(token: str, position: int | None = None) -> Diagnostic:
        """Private-use token fails alphanum{1,8}.

        Args:
            token: The rejected token
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_PRIVATE
        """
        msg = f"Invalid private-use subtag '{token}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PRIVATE,
            message=msg,
            span=_span(token, position),
            subtag=token,
            hint="Private-use subtags are 1-8 ASCII alphanumeric characters",
        )

    @staticmethod
    def ambiguous_private(token: str, position: int | None = None) -> Diagnostic:
        """Second single-letter private-use token.

        A single letter after the first private-use subtag reads as a new
        extension singleton, so only one such token can be serialized.

        Args:
            token: The rejected token
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for AMBIGUOUS_PRIVATE
        """
        msg = f"Private-use subtag '{token}' would read as an extension singleton"
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_PRIVATE,
            message=msg,
            span=_span(token, position),
            subtag=token,
            hint="Only one single-letter private-use subtag is allowed",
        )

    @staticmethod
    def invalid_extension_letter(letter: str) -> Diagnostic:
        """Letter not usable as an 'other' extension singleton.

        Args:
            letter: The rejected singleton

        Returns:
            Diagnostic for INVALID_EXTENSION_LETTER
        """
        msg = f"'{letter}' is not a valid extension singleton for other extensions"
        return Diagnostic(
            code=DiagnosticCode.INVALID_EXTENSION_LETTER,
            message=msg,
            subtag=letter,
            hint="Use a single ASCII letter other than 't', 'u' and 'x'",
        )

    @staticmethod
    def invalid_other_value(letter: str, value: str, position: int | None = None) -> Diagnostic:
        """Other-extension subtag fails alphanum{2,8}.

        Args:
            letter: The extension singleton
            value: The rejected subtag
            position: Character offset in the input, if parsed

        Returns:
            Diagnostic for INVALID_OTHER_VALUE
        """
        msg = f"Invalid subtag '{value}' in extension '{letter}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OTHER_VALUE,
            message=msg,
            span=_span(value, position),
            subtag=value,
            hint="Extension subtags are 2-8 ASCII alphanumeric characters",
        )
