"""localetag - BCP 47 / Unicode locale identifiers with extension sequences.

Parses, canonicalizes, compares and mutates locale identifiers made of a
base subtag sequence (language, script, region, variants) followed by
extension sequences: the Unicode locale extension 'u', the transform
extension 't', the private-use extension 'x' and any other single-letter
extension.

Public API:
    Locale - Base subtags plus extensions
    LanguageIdentifier - Base subtags only
    ExtensionsMap - All extension sequences of one locale
    canonicalize - Parse then re-serialize locale text

Exceptions:
    LocaleError - Base exception class (a ValueError)
    LocaleParserError - Malformed locale or extension text
    SubtagsError - Invalid language, script, region or variant

Submodules:
    localetag.extensions - Extension records and their parser
    localetag.subtags - Base subtags, matching, likely subtags
    localetag.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import LocaleError, LocaleParserError, SubtagsError
from .enums import CharacterDirection, ExtensionType, UnicodeExtensionKey
from .extensions import ExtensionsMap
from .locale import Locale, canonicalize
from .subtags import LanguageIdentifier

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localetag")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CharacterDirection",
    "ExtensionType",
    "ExtensionsMap",
    "LanguageIdentifier",
    "Locale",
    "LocaleError",
    "LocaleParserError",
    "SubtagsError",
    "UnicodeExtensionKey",
    "__version__",
    "canonicalize",
]
