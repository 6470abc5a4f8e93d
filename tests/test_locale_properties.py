"""Property-based tests for Locale parsing and canonical serialization.

Generated inputs vary separators, casing and extension order; the canonical
form must absorb all of that.

Python 3.13+.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from localetag import ExtensionsMap, Locale, canonicalize
from tests.strategies import (
    attributes,
    locale_texts,
    locale_texts_with_shuffled_extensions,
    private_tokens,
)


class TestCanonicalForm:
    """Round-trip and idempotence of parse and str."""

    @given(text=locale_texts())
    def test_roundtrip(self, text: str) -> None:
        """Re-parsing the canonical text gives an equal Locale."""
        locale = Locale.parse(text)
        assert Locale.parse(str(locale)) == locale

    @given(text=locale_texts())
    def test_idempotent(self, text: str) -> None:
        """Serialization of a re-parsed locale does not change."""
        once = str(Locale.parse(text))
        assert str(Locale.parse(once)) == once

    @given(text=locale_texts())
    def test_canonicalize_matches_str(self, text: str) -> None:
        """canonicalize() is parse followed by str()."""
        assert canonicalize(text) == str(Locale.parse(text))

    @given(text=locale_texts())
    def test_canonical_text_shape(self, text: str) -> None:
        """Canonical text uses '-' only and keeps private use last."""
        canonical = canonicalize(text)
        assert "_" not in canonical
        if "-x-" in canonical:
            event("has_private_use=True")
            tail = canonical.split("-x-", 1)[1]
            assert all(len(subtag) > 1 or not subtag.isalpha() for subtag in tail.split("-")[1:])

    @given(pair=locale_texts_with_shuffled_extensions())
    def test_extension_order_irrelevant(self, pair: tuple[str, str]) -> None:
        """Reordering extension sequences changes neither equality nor text."""
        first, second = pair
        assert Locale.parse(first) == Locale.parse(second)
        assert canonicalize(first) == canonicalize(second)

    @given(text=locale_texts())
    def test_copy_equal(self, text: str) -> None:
        """copy() produces an equal Locale."""
        locale = Locale.parse(text)
        assert locale.copy() == locale


class TestProgrammaticBuild:
    """Maps built with setters behave like parsed ones."""

    @given(
        attrs=st.sets(attributes, max_size=3),
        tokens=st.sets(private_tokens, min_size=1, max_size=4),
    )
    def test_setters_roundtrip(self, attrs: set[str], tokens: set[str]) -> None:
        """Serializing a programmatic map and parsing it back is lossless."""
        extensions = ExtensionsMap()
        for attr in attrs:
            extensions.set_unicode_attribute(attr)
        for token in tokens:
            extensions.set_private_value(token)
        extensions.set_unicode_value("hc", "h23")

        assert ExtensionsMap.parse(str(extensions)) == extensions

    @given(text=locale_texts())
    def test_matches_self_without_private_use(self, text: str) -> None:
        """A locale matches itself unless it carries private-use tokens."""
        locale = Locale.parse(text)
        has_private = not locale.extensions.private.is_empty()
        event(f"has_private_use={has_private}")
        assert locale.matches(locale) is not has_private
