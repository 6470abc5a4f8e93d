"""Writing direction lookup from script, or from language when script is unset.

The tables cover scripts and languages CLDR marks as right-to-left or
top-to-bottom; everything else is left-to-right.
"""

from localetag.enums import CharacterDirection

__all__ = ["character_direction"]

RTL_SCRIPTS: frozenset[str] = frozenset({
    "Adlm", "Arab", "Armi", "Avst", "Chrs", "Cprt", "Elym", "Hatr", "Hebr",
    "Hung", "Khar", "Lydi", "Mand", "Mani", "Mend", "Merc", "Mero", "Narb",
    "Nbat", "Nkoo", "Orkh", "Ougr", "Palm", "Phli", "Phlp", "Phnx", "Prti",
    "Rohg", "Samr", "Sarb", "Sogd", "Sogo", "Syrc", "Thaa", "Yezi",
})

TTB_SCRIPTS: frozenset[str] = frozenset({"Mong"})

# Languages whose default script is right-to-left.
RTL_LANGUAGES: frozenset[str] = frozenset({
    "ar", "arc", "ckb", "dv", "fa", "he", "iw", "ks", "lrc",
    "mzn", "nqo", "ps", "sd", "syr", "ug", "ur", "yi",
})


def character_direction(language: str | None, script: str | None) -> CharacterDirection:
    """Resolve writing direction; script wins over language.

    Example:
        >>> character_direction("ar", None)
        <CharacterDirection.RTL: 'rtl'>
        >>> character_direction("ar", "Latn")
        <CharacterDirection.LTR: 'ltr'>
        >>> character_direction("mn", "Mong")
        <CharacterDirection.TTB: 'ttb'>
    """
    if script is not None:
        if script in RTL_SCRIPTS:
            return CharacterDirection.RTL
        if script in TTB_SCRIPTS:
            return CharacterDirection.TTB
        return CharacterDirection.LTR
    if language in RTL_LANGUAGES:
        return CharacterDirection.RTL
    return CharacterDirection.LTR
