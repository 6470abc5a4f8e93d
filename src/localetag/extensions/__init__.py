"""Extension sequences of a locale identifier.

Exports:
    ExtensionsMap: All extension sequences of one locale
    UnicodeExtension: 'u' attributes and keywords
    TransformExtension: 't' source language and fields
    PrivateExtension: 'x' private-use tokens
    KeySpec / KEY_SPECS: Per-keyword value rules for 'u'
    parse_extensions: Parse an extension tail into an ExtensionsMap

Python 3.13+. Zero external dependencies.
"""

from .keys import KEY_SPECS, KeySpec
from .map import ExtensionsMap
from .parser import parse_extensions, parse_extensions_from_cursor
from .private import PrivateExtension
from .transform import TransformExtension
from .unicode import UnicodeExtension

__all__ = [
    "KEY_SPECS",
    "ExtensionsMap",
    "KeySpec",
    "PrivateExtension",
    "TransformExtension",
    "UnicodeExtension",
    "parse_extensions",
    "parse_extensions_from_cursor",
]
