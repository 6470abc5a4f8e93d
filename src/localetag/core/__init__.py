"""Core utilities shared across the subtags, extensions and locale layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- subtags <- extensions <- locale

Exports:
    Cursor: Immutable cursor over tokenized subtags
    ParseResult: Parsed value plus the cursor after it
    Subtag: One positioned token
    tokenize: Split locale text into positioned subtags

Python 3.13+.
"""

from .cursor import Cursor, ParseResult, Subtag, tokenize

__all__ = ["Cursor", "ParseResult", "Subtag", "tokenize"]
