"""Tests for likely-subtag expansion and contraction over Babel's CLDR data.

Python 3.13+.
"""

import logging

import pytest

pytest.importorskip("babel")

from localetag import LanguageIdentifier, Locale  # noqa: E402
from localetag.subtags.likely import maximize  # noqa: E402


class TestMaximize:
    """Test the lookup behind add_likely_subtags()."""

    def test_language_only(self) -> None:
        """A bare language fills script and region."""
        assert maximize("en", None, None) == ("en", "Latn", "US")

    def test_region_selects_script(self) -> None:
        """Language plus region picks the matching script."""
        assert maximize("zh", None, "TW") == ("zh", "Hant", "TW")

    def test_undetermined_language(self) -> None:
        """'und' expands to the default locale."""
        assert maximize(None, None, None) == ("en", "Latn", "US")

    def test_script_only(self) -> None:
        """A script alone picks its most likely language."""
        assert maximize(None, "Hant", None) == ("zh", "Hant", "TW")

    def test_present_fields_kept(self) -> None:
        """Fields already set are never replaced."""
        assert maximize("en", None, "GB") == ("en", "Latn", "GB")

    def test_unknown_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A miss returns None and logs at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="localetag"):
            assert maximize("qqq", None, None) is None
        assert "No likely subtags for qqq" in caplog.text


class TestAddLikelySubtags:
    """Test add_likely_subtags()."""

    def test_identifier(self) -> None:
        """Maximizes in place and reports the change."""
        langid = LanguageIdentifier.parse("en")
        assert langid.add_likely_subtags() is True
        assert str(langid) == "en-Latn-US"

    def test_already_maximal(self) -> None:
        """A full identifier is left alone."""
        langid = LanguageIdentifier.parse("en-Latn-US")
        assert langid.add_likely_subtags() is False

    def test_variants_preserved(self) -> None:
        """Variants survive maximization."""
        langid = LanguageIdentifier.parse("de-1996")
        langid.add_likely_subtags()
        assert str(langid) == "de-Latn-DE-1996"

    def test_locale_keeps_extensions(self) -> None:
        """Extensions are untouched."""
        locale = Locale.parse("sr-u-nu-latn")
        assert locale.add_likely_subtags() is True
        assert str(locale) == "sr-Cyrl-RS-u-nu-latn"

    def test_unknown_language_unchanged(self) -> None:
        """Nothing changes when CLDR has no entry."""
        langid = LanguageIdentifier.parse("qqq")
        assert langid.add_likely_subtags() is False
        assert str(langid) == "qqq"


class TestRemoveLikelySubtags:
    """Test remove_likely_subtags()."""

    def test_identifier(self) -> None:
        """Minimizes to the shortest equivalent form."""
        langid = LanguageIdentifier.parse("en-Latn-US")
        assert langid.remove_likely_subtags() is True
        assert str(langid) == "en"

    def test_keeps_region_when_needed(self) -> None:
        """Traditional Chinese minimizes to language plus region."""
        langid = LanguageIdentifier.parse("zh-Hant-TW")
        assert langid.remove_likely_subtags() is True
        assert str(langid) == "zh-TW"

    def test_locale_keeps_extensions(self) -> None:
        """Extensions are untouched."""
        locale = Locale.parse("en-Latn-US-u-hc-h12")
        assert locale.remove_likely_subtags() is True
        assert str(locale) == "en-u-hc-h12"

    def test_already_minimal(self) -> None:
        """A minimal identifier reports no change."""
        langid = LanguageIdentifier.parse("en")
        assert langid.remove_likely_subtags() is False

    def test_roundtrip(self) -> None:
        """Maximizing a minimized identifier restores it."""
        langid = LanguageIdentifier.parse("pt-Latn-BR")
        langid.remove_likely_subtags()
        langid.add_likely_subtags()
        assert str(langid) == "pt-Latn-BR"
