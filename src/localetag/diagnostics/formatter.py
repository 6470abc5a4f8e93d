"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate subtag content in the output
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.duplicate_keyword("hc", 6)
        >>> print(formatter.format(diagnostic))
        error[DUPLICATE_KEYWORD]: Duplicate unicode extension keyword 'hc'
          --> characters 6..8
          = help: Each keyword may appear once per unicode extension

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        DUPLICATE_KEYWORD: Duplicate unicode extension keyword 'hc'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _escape(self, text: str) -> str:
        """Escape control characters and optionally truncate."""
        escaped = text.encode("unicode_escape").decode("ascii")
        if self.sanitize and len(escaped) > self.max_content_length:
            return escaped[: self.max_content_length] + "..."
        return escaped

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: {self._escape(diagnostic.message)}"
        ]
        if diagnostic.span is not None:
            lines.append(f"  --> characters {diagnostic.span.start}..{diagnostic.span.end}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._escape(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, object] = {
            "code": diagnostic.code.name,
            "message": self._escape(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.subtag is not None:
            payload["subtag"] = self._escape(diagnostic.subtag)
        if diagnostic.span is not None:
            payload["start"] = diagnostic.span.start
            payload["end"] = diagnostic.span.end
        if diagnostic.hint:
            payload["hint"] = diagnostic.hint
        return json.dumps(payload)
