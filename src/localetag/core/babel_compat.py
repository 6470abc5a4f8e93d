"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that parsing,
serialization and matching never import it. Only likely-subtag expansion
reads CLDR data, and only from here.

Design Rationale:
    localetag supports two installation modes:
    - Core: `pip install localetag` (no external dependencies)
    - Likely subtags: `pip install localetag[babel]` (Babel's CLDR snapshot)

Usage Pattern:
    from localetag.core.babel_compat import get_likely_subtags

    def add_likely_subtags(...) -> bool:
        table = get_likely_subtags()  # Raises BabelImportError if missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

__all__ = [
    "BabelImportError",
    "get_likely_subtags",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR likely-subtags data. "
            "Install with: pip install localetag[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


@lru_cache(maxsize=1)
def _load_likely_subtags() -> Mapping[str, str]:
    # Lazy import: Babel loads CLDR pickles on first access
    from babel.core import get_global  # noqa: PLC0415

    return get_global("likely_subtags")


def get_likely_subtags() -> Mapping[str, str]:
    """Get CLDR likely-subtags table from Babel.

    Keys and values use Babel's underscore identifiers, e.g.
    ``{"en": "en_Latn_US", "und_TW": "zh_Hant_TW", ...}``.
    The table is loaded once and cached.

    Returns:
        Read-only mapping of partial identifier to maximized identifier

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("Likely subtags")
    return _load_likely_subtags()
