"""Likely-subtag expansion and contraction (CLDR "Add/Remove Likely Subtags").

Data comes from Babel's CLDR snapshot via core.babel_compat; without Babel
both operations raise BabelImportError. Only language, script and region
are affected; variants are preserved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from localetag.constants import UNDETERMINED_LANGUAGE
from localetag.core.babel_compat import get_likely_subtags
from localetag.core.cursor import Cursor

from .parser import parse_language_identifier

if TYPE_CHECKING:
    from .protocol import SubtagsProtocol

__all__ = ["add_likely_subtags", "maximize", "remove_likely_subtags"]

logger = logging.getLogger(__name__)

Triple: TypeAlias = tuple[str | None, str | None, str | None]


def _table_key(language: str | None, script: str | None, region: str | None) -> str:
    return "_".join(part for part in (language or UNDETERMINED_LANGUAGE, script, region) if part)


def maximize(language: str | None, script: str | None, region: str | None) -> Triple | None:
    """Fill in missing language, script and region from CLDR data.

    Lookup order: L_S_R, L_R, L_S, L, und_S. Fields already present are
    kept; only empty ones are taken from the match.

    Returns:
        Maximized (language, script, region), or None if CLDR has no entry

    Raises:
        BabelImportError: If Babel is not installed
    """
    table = get_likely_subtags()

    candidates: list[Triple] = []
    if script and region:
        candidates.append((language, script, region))
    if region:
        candidates.append((language, None, region))
    if script:
        candidates.append((language, script, None))
    candidates.append((language, None, None))
    if script and language is not None:
        candidates.append((None, script, None))

    for candidate in candidates:
        expanded = table.get(_table_key(*candidate))
        if expanded is None:
            continue
        found = parse_language_identifier(Cursor.from_text(expanded)).value
        return (
            language or found.language,
            script or found.script,
            region or found.region,
        )

    logger.debug("No likely subtags for %s", _table_key(language, script, region))
    return None


def _apply(langid: SubtagsProtocol, triple: Triple) -> bool:
    before = (langid.language, langid.script, langid.region)
    langid.language, langid.script, langid.region = triple
    return before != triple


def add_likely_subtags(langid: SubtagsProtocol) -> bool:
    """Maximize langid in place.

    Returns:
        True if any field changed

    Example:
        >>> from localetag.subtags import LanguageIdentifier
        >>> langid = LanguageIdentifier.parse("en")
        >>> add_likely_subtags(langid), str(langid)
        (True, 'en-Latn-US')
    """
    if langid.language and langid.script and langid.region:
        return False
    maximized = maximize(langid.language, langid.script, langid.region)
    if maximized is None:
        return False
    return _apply(langid, maximized)


def remove_likely_subtags(langid: SubtagsProtocol) -> bool:
    """Minimize langid in place.

    Tries language, language-region, language-script in that order and keeps
    the first whose maximization equals the maximized input.

    Returns:
        True if any field changed

    Example:
        >>> from localetag.subtags import LanguageIdentifier
        >>> langid = LanguageIdentifier.parse("zh-Hant-TW")
        >>> remove_likely_subtags(langid), str(langid)
        (True, 'zh-TW')
    """
    maximized = maximize(langid.language, langid.script, langid.region)
    if maximized is None:
        return False
    language, script, region = maximized

    trials: tuple[Triple, ...] = (
        (language, None, None),
        (language, None, region),
        (language, script, None),
    )
    for trial in trials:
        if maximize(*trial) == maximized:
            return _apply(langid, trial)
    return _apply(langid, maximized)
