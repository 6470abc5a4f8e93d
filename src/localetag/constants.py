"""Shared constants for localetag.

This module provides centralized configuration constants used across the
subtags, extensions and locale layers. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Separators: Subtag delimiters accepted on input and emitted on output
- Subtag bounds: Length limits from the BCP-47 / UTS #35 grammar
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for memoized canonicalization

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separators
    "SEPARATOR",
    "INPUT_SEPARATORS",
    # Subtag bounds
    "UNDETERMINED_LANGUAGE",
    "LANGUAGE_SHORT_RANGE",
    "LANGUAGE_LONG_RANGE",
    "SCRIPT_LENGTH",
    "VARIANT_RANGE",
    "ATTRIBUTE_RANGE",
    "KEY_LENGTH",
    "TYPE_RANGE",
    "PRIVATE_RANGE",
    "OTHER_RANGE",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Cache limits
    "MAX_CANONICAL_CACHE_SIZE",
]

# ============================================================================
# SEPARATORS
# ============================================================================

# Canonical separator emitted by every serializer.
SEPARATOR: str = "-"

# Separators accepted by the parsers. Underscore is tolerated so POSIX-style
# codes ("en_US") parse, but it is never emitted.
INPUT_SEPARATORS: str = "-_"

# ============================================================================
# SUBTAG BOUNDS
# ============================================================================
#
# Ranges are inclusive (min, max) character counts.

# Language subtag that means "no language"; stored as None.
UNDETERMINED_LANGUAGE: str = "und"

# unicode_language_subtag = alpha{2,3} | alpha{5,8}
LANGUAGE_SHORT_RANGE: tuple[int, int] = (2, 3)
LANGUAGE_LONG_RANGE: tuple[int, int] = (5, 8)

# unicode_script_subtag = alpha{4}
SCRIPT_LENGTH: int = 4

# unicode_variant_subtag = (alphanum{5,8} | digit alphanum{3})
VARIANT_RANGE: tuple[int, int] = (5, 8)

# Unicode extension attribute = alphanum{3,8}
ATTRIBUTE_RANGE: tuple[int, int] = (3, 8)

# Unicode extension key and transform field key are both two characters.
KEY_LENGTH: int = 2

# Unicode/transform type subtag = alphanum{3,8}
TYPE_RANGE: tuple[int, int] = (3, 8)

# Private-use subtag = alphanum{1,8}
PRIVATE_RANGE: tuple[int, int] = (1, 8)

# Other extension subtag = alphanum{2,8}
OTHER_RANGE: tuple[int, int] = (2, 8)

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum accepted locale text length in characters.
# Real-world tags stay well under 100 characters; anything longer is
# rejected before tokenization.
MAX_INPUT_LENGTH: int = 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized canonicalize() results.
# 256 covers the distinct tags a typical multi-locale application handles.
MAX_CANONICAL_CACHE_SIZE: int = 256
