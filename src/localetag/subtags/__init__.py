"""Base subtags layer: language, script, region and variants.

The locale layer consumes this package only through SubtagsProtocol:
parse, from_parts, field accessors, matches, str() and likely subtags.

Exports:
    LanguageIdentifier: Concrete subtags value
    SubtagsProtocol: Capability interface used by Locale
    base_matches: Range-aware field comparison
    parse_language_identifier: Head parser returning the remainder cursor
"""

from .identifier import LanguageIdentifier
from .matcher import base_matches
from .parser import parse_language_identifier
from .protocol import SubtagsProtocol

__all__ = [
    "LanguageIdentifier",
    "SubtagsProtocol",
    "base_matches",
    "parse_language_identifier",
]
