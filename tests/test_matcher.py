"""Tests for range-aware base subtag matching.

base_matches() only reads the four field attributes, so any object
satisfying SubtagsProtocol works; a minimal stand-in exercises that seam.

Python 3.13+.
"""

from dataclasses import dataclass

import pytest
from hypothesis import given

from localetag import LanguageIdentifier, Locale
from localetag.subtags import base_matches
from localetag.subtags.matcher import subtag_matches
from tests.strategies import locale_base_texts


@dataclass
class FieldsOnly:
    """Minimal subtags stand-in with only the compared fields."""

    language: str | None = None
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()


class TestSubtagMatches:
    """Test the per-field rule."""

    @pytest.mark.parametrize(
        ("first", "second", "first_range", "second_range", "expected"),
        [
            ("en", "en", False, False, True),
            ("en", "de", True, True, False),
            (None, "US", True, False, True),
            (None, "US", False, True, False),
            ("US", None, False, True, True),
            (None, None, False, False, True),
            ((), ("macos",), True, False, True),
            ((), ("macos",), False, False, False),
            (("macos",), ("macos",), False, False, True),
        ],
    )
    def test_rule(
        self,
        first: str | None | tuple[str, ...],
        second: str | None | tuple[str, ...],
        first_range: bool,
        second_range: bool,
        expected: bool,
    ) -> None:
        """Empty fields of a range match anything; otherwise values must be equal."""
        assert subtag_matches(first, second, first_range, second_range) is expected


class TestBaseMatches:
    """Test whole-identifier matching."""

    def test_stand_in_objects(self) -> None:
        """Any object with the four fields can be matched."""
        range_ = FieldsOnly(language="en")
        tag = FieldsOnly(language="en", region="US", variants=("posix",))
        assert base_matches(range_, tag, True, False)
        assert not base_matches(range_, tag, False, False)

    def test_stand_in_against_identifier(self) -> None:
        """Stand-ins and real identifiers mix freely."""
        langid = LanguageIdentifier.parse("en-US")
        assert base_matches(FieldsOnly(), langid, True, False)
        assert not base_matches(FieldsOnly(language="de"), langid, True, False)

    def test_language_wildcard(self) -> None:
        """An 'und' range matches any language."""
        und_us = LanguageIdentifier.parse("und-US")
        assert base_matches(und_us, LanguageIdentifier.parse("en-US"), True, False)
        assert not base_matches(und_us, LanguageIdentifier.parse("en-GB"), True, False)

    def test_locale_as_subtags(self) -> None:
        """A Locale exposes its base fields to the matcher."""
        locale = Locale.parse("en-US-u-hc-h12")
        assert base_matches(locale, LanguageIdentifier.parse("en-US"), False, False)

    @given(text=locale_base_texts)
    def test_reflexive(self, text: str) -> None:
        """Every identifier matches itself under every flag combination."""
        langid = LanguageIdentifier.parse(text)
        for first_range in (False, True):
            for second_range in (False, True):
                assert base_matches(langid, langid, first_range, second_range)

    @given(text=locale_base_texts)
    def test_empty_range_matches_everything(self, text: str) -> None:
        """'und' as a range matches any identifier."""
        langid = LanguageIdentifier.parse(text)
        assert base_matches(LanguageIdentifier(), langid, True, False)
