"""Hypothesis strategies for localetag property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- locale: base subtags, extension sequences and complete locale texts

Usage:
    from tests.strategies import locale_texts
    from tests.strategies.locale import base_parts, extension_sequences

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - extension_sequences, locale_texts
"""

from .locale import (
    attributes,
    base_parts,
    extension_sequences,
    languages,
    locale_base_texts,
    locale_texts,
    locale_texts_with_shuffled_extensions,
    private_sequences,
    private_tokens,
    regions,
    scripts,
    transform_sequences,
    unicode_sequences,
    variants,
)

__all__ = [
    "attributes",
    "base_parts",
    "extension_sequences",
    "languages",
    "locale_base_texts",
    "locale_texts",
    "locale_texts_with_shuffled_extensions",
    "private_sequences",
    "private_tokens",
    "regions",
    "scripts",
    "transform_sequences",
    "unicode_sequences",
    "variants",
]
