"""Tests for ExtensionsMap and its per-kind records.

Covers validating setters, removal, canonical serialization order and
order-independent equality for the 'u', 't', 'x' and other extensions.

Python 3.13+.
"""

import pytest

from localetag import ExtensionsMap, LanguageIdentifier, LocaleParserError, SubtagsError
from localetag.diagnostics import DiagnosticCode
from localetag.enums import UnicodeExtensionKey
from localetag.extensions import PrivateExtension, TransformExtension, UnicodeExtension


class TestEmptyMap:
    """Test the empty map."""

    def test_empty(self) -> None:
        """A new map is empty and serializes to the empty string."""
        extensions = ExtensionsMap()
        assert extensions.is_empty()
        assert str(extensions) == ""
        assert not extensions

    def test_parse_empty(self) -> None:
        """Empty extension text yields an empty map."""
        assert ExtensionsMap.parse("") == ExtensionsMap()

    def test_not_empty_after_set(self) -> None:
        """Any populated sequence makes the map non-empty."""
        extensions = ExtensionsMap()
        extensions.set_other_values("a", ["bcd"])
        assert not extensions.is_empty()
        assert extensions


class TestUnicodeValues:
    """Test unicode keyword setters."""

    def test_set_and_get(self) -> None:
        """A set keyword reads back in canonical case."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("HC", "H12")
        assert extensions.get_unicode_value("hc") == "h12"
        assert str(extensions) == "u-hc-h12"

    def test_set_with_enum_key(self) -> None:
        """UnicodeExtensionKey members are accepted as keys."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value(UnicodeExtensionKey.CALENDAR, "buddhist")
        assert extensions.get_unicode_value(UnicodeExtensionKey.CALENDAR) == "buddhist"

    def test_overwrite(self) -> None:
        """Setting an existing keyword replaces its value."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("hc", "h12")
        extensions.set_unicode_value("hc", "h23")
        assert str(extensions) == "u-hc-h23"

    def test_multi_subtag_value(self) -> None:
        """Values of multi-subtag keys accept either separator."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("ca", "islamic_civil")
        assert str(extensions) == "u-ca-islamic-civil"

    def test_value_less_flag(self) -> None:
        """Boolean keys may be set without a value."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("kn")
        assert extensions.get_unicode_value("kn") is None
        assert str(extensions) == "u-kn"

    def test_unknown_key_rejected(self) -> None:
        """Keys outside the closed enumeration are rejected."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_unicode_value("zz", "foo")
        assert exc_info.value.code is DiagnosticCode.UNKNOWN_KEY

    def test_malformed_key_rejected(self) -> None:
        """Keys must be alphanum then alpha."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_unicode_value("h1", "foo")
        assert exc_info.value.code is DiagnosticCode.INVALID_SUBTAG

    def test_value_outside_closed_set_rejected(self) -> None:
        """Keys with a closed value set reject anything else."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_unicode_value("hc", "h13")
        assert exc_info.value.code is DiagnosticCode.INVALID_KEY_VALUE

    def test_too_many_subtags_rejected(self) -> None:
        """Single-subtag keys reject multi-subtag values."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_unicode_value("nu", "latn-arab")
        assert exc_info.value.code is DiagnosticCode.INVALID_KEY_VALUE

    def test_value_less_any_key(self) -> None:
        """Any key may be set without a value, matching what the parser accepts."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("ca")
        extensions.set_unicode_attribute("foo")
        assert extensions.get_unicode_value("ca") is None
        assert str(extensions) == "u-foo-ca"
        assert ExtensionsMap.parse(str(extensions)) == extensions

    def test_failed_set_leaves_map_unchanged(self) -> None:
        """A rejected value does not replace the existing one."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("hc", "h12")
        with pytest.raises(LocaleParserError):
            extensions.set_unicode_value("hc", "bogus")
        assert extensions.get_unicode_value("hc") == "h12"

    def test_get_missing_raises_key_error(self) -> None:
        """Reading an unset keyword raises KeyError."""
        with pytest.raises(KeyError):
            ExtensionsMap().get_unicode_value("hc")

    def test_remove(self) -> None:
        """remove_unicode_value reports whether the keyword was present."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("hc", "h12")
        assert extensions.remove_unicode_value("hc") is True
        assert extensions.remove_unicode_value("hc") is False
        assert extensions.is_empty()

    def test_remove_value_less_keyword(self) -> None:
        """A value-less keyword is still removable."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("kb")
        assert extensions.remove_unicode_value("kb") is True


class TestUnicodeAttributes:
    """Test unicode attribute setters."""

    def test_attributes_sorted_before_keywords(self) -> None:
        """Attributes serialize sorted and ahead of keywords."""
        extensions = ExtensionsMap()
        extensions.set_unicode_value("hc", "h12")
        extensions.set_unicode_attribute("zeta")
        extensions.set_unicode_attribute("Alpha")
        assert str(extensions) == "u-alpha-zeta-hc-h12"

    def test_set_attribute_idempotent(self) -> None:
        """Adding an existing attribute is a no-op."""
        extensions = ExtensionsMap()
        extensions.set_unicode_attribute("foo")
        extensions.set_unicode_attribute("FOO")
        assert extensions.unicode.attributes == {"foo"}

    def test_invalid_attribute_rejected(self) -> None:
        """Attributes are 3-8 alphanumerics."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_unicode_attribute("ab")
        assert exc_info.value.code is DiagnosticCode.INVALID_ATTRIBUTE

    def test_remove_attribute(self) -> None:
        """remove_unicode_attribute reports presence."""
        extensions = ExtensionsMap()
        extensions.set_unicode_attribute("foo")
        assert extensions.remove_unicode_attribute("FOO") is True
        assert extensions.remove_unicode_attribute("foo") is False


class TestTransform:
    """Test transform extension setters."""

    def test_tlang_and_fields(self) -> None:
        """Source language precedes fields sorted by key."""
        extensions = ExtensionsMap()
        extensions.set_transform_field("s0", "ascii-pinyin")
        extensions.set_transform_field("M0", "UNGEGN")
        extensions.set_transform_lang("ja")
        assert str(extensions) == "t-ja-m0-ungegn-s0-ascii-pinyin"

    def test_tlang_from_identifier(self) -> None:
        """A LanguageIdentifier is accepted as the source language."""
        extensions = ExtensionsMap()
        extensions.set_transform_lang(LanguageIdentifier.parse("en-US"))
        assert str(extensions) == "t-en-US"

    def test_clear_tlang(self) -> None:
        """None clears the source language."""
        extensions = ExtensionsMap()
        extensions.set_transform_lang("ja")
        extensions.set_transform_lang(None)
        assert extensions.is_empty()

    def test_invalid_tlang_rejected(self) -> None:
        """An invalid source language raises the subtags error."""
        with pytest.raises(SubtagsError):
            ExtensionsMap().set_transform_lang("j4")

    def test_invalid_field_key_rejected(self) -> None:
        """Field keys are alpha then digit."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_transform_field("0m", "ungegn")
        assert exc_info.value.code is DiagnosticCode.INVALID_FIELD_KEY

    def test_invalid_field_value_rejected(self) -> None:
        """Field value subtags are 3-8 alphanumerics."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_transform_field("m0", "ab")
        assert exc_info.value.code is DiagnosticCode.INVALID_FIELD_VALUE

    def test_remove_field(self) -> None:
        """remove_transform_field reports presence."""
        extensions = ExtensionsMap()
        extensions.set_transform_field("m0", "ungegn")
        assert extensions.remove_transform_field("M0") is True
        assert extensions.remove_transform_field("m0") is False
        assert extensions.transform.is_empty()

    def test_get_field(self) -> None:
        """Fields read back by case-insensitive key."""
        transform = TransformExtension()
        transform.set_field("h0", "hybrid")
        assert transform.get_field("H0") == "hybrid"


class TestPrivate:
    """Test private-use setters."""

    def test_tokens_sorted(self) -> None:
        """Tokens serialize sorted regardless of insertion order."""
        extensions = ExtensionsMap()
        extensions.set_private_value("zeta")
        extensions.set_private_value("Alpha")
        assert str(extensions) == "x-alpha-zeta"
        assert list(extensions.private) == ["zeta", "alpha"]

    def test_value_argument_ignored(self) -> None:
        """The value argument exists for signature parity only."""
        extensions = ExtensionsMap()
        extensions.set_private_value("foo", "ignored")
        assert str(extensions) == "x-foo"

    def test_duplicate_rejected(self) -> None:
        """Private-use tokens are unique."""
        extensions = ExtensionsMap()
        extensions.set_private_value("foo")
        with pytest.raises(LocaleParserError) as exc_info:
            extensions.set_private_value("FOO")
        assert exc_info.value.code is DiagnosticCode.DUPLICATE_PRIVATE

    def test_invalid_token_rejected(self) -> None:
        """Tokens are 1-8 alphanumerics."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_private_value("toolongtoken")
        assert exc_info.value.code is DiagnosticCode.INVALID_PRIVATE

    def test_single_letter_token_first(self) -> None:
        """A single-letter token serializes ahead of the others."""
        extensions = ExtensionsMap()
        extensions.set_private_value("foo")
        extensions.set_private_value("b")
        extensions.set_private_value("1")
        assert str(extensions) == "x-b-1-foo"
        assert ExtensionsMap.parse(str(extensions)) == extensions

    def test_second_single_letter_rejected(self) -> None:
        """Only one single-letter token fits a serializable sequence."""
        extensions = ExtensionsMap()
        extensions.set_private_value("a")
        with pytest.raises(LocaleParserError) as exc_info:
            extensions.set_private_value("b")
        assert exc_info.value.code is DiagnosticCode.AMBIGUOUS_PRIVATE

    def test_remove(self) -> None:
        """remove_private_value reports presence."""
        extensions = ExtensionsMap()
        extensions.set_private_value("foo")
        assert extensions.remove_private_value("FOO") is True
        assert extensions.remove_private_value("foo") is False

    def test_membership(self) -> None:
        """Membership is case-insensitive and length counts tokens."""
        private = PrivateExtension()
        private.add("foo")
        assert "FOO" in private
        assert 42 not in private
        assert len(private) == 1


class TestOther:
    """Test other single-letter extensions."""

    def test_set_and_get(self) -> None:
        """Values are lowercased and kept in order."""
        extensions = ExtensionsMap()
        extensions.set_other_values("A", ["ZZ", "bcd"])
        assert extensions.get_other_values("a") == ("zz", "bcd")
        assert str(extensions) == "a-zz-bcd"

    @pytest.mark.parametrize("letter", ["t", "u", "x", "X", "ab", "1", ""])
    def test_reserved_or_invalid_letter_rejected(self, letter: str) -> None:
        """t, u, x and non-letters cannot be other extensions."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_other_values(letter, ["abc"])
        assert exc_info.value.code is DiagnosticCode.INVALID_EXTENSION_LETTER

    def test_empty_values_rejected(self) -> None:
        """An other extension needs at least one subtag."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_other_values("a", [])
        assert exc_info.value.code is DiagnosticCode.EMPTY_EXTENSION

    def test_invalid_value_rejected(self) -> None:
        """Values are 2-8 alphanumerics."""
        with pytest.raises(LocaleParserError) as exc_info:
            ExtensionsMap().set_other_values("a", ["b"])
        assert exc_info.value.code is DiagnosticCode.INVALID_OTHER_VALUE

    def test_remove(self) -> None:
        """remove_other reports presence."""
        extensions = ExtensionsMap()
        extensions.set_other_values("a", ["bcd"])
        assert extensions.remove_other("A") is True
        assert extensions.remove_other("a") is False

    def test_get_missing_raises_key_error(self) -> None:
        """Reading an absent extension raises KeyError."""
        with pytest.raises(KeyError):
            ExtensionsMap().get_other_values("a")


class TestSerializationOrder:
    """Test canonical sequence order: t, u, others, x."""

    def test_full_order(self) -> None:
        """Sequences serialize in canonical order whatever the setup order."""
        extensions = ExtensionsMap()
        extensions.set_private_value("foo")
        extensions.set_other_values("z", ["zzz"])
        extensions.set_other_values("b", ["bbb"])
        extensions.set_unicode_value("hc", "h12")
        extensions.set_transform_lang("ja")
        assert str(extensions) == "t-ja-u-hc-h12-b-bbb-z-zzz-x-foo"

    def test_equality_independent_of_population_order(self) -> None:
        """Maps with the same content are equal regardless of setter order."""
        first = ExtensionsMap()
        first.set_unicode_value("hc", "h12")
        first.set_unicode_value("ca", "buddhist")
        first.set_private_value("foo")
        first.set_private_value("bar")

        second = ExtensionsMap()
        second.set_private_value("bar")
        second.set_private_value("foo")
        second.set_unicode_value("ca", "buddhist")
        second.set_unicode_value("hc", "h12")

        assert first == second
        assert str(first) == str(second)

    def test_copy_is_deep(self) -> None:
        """copy() shares no mutable state."""
        extensions = ExtensionsMap.parse("t-ja-u-foo-hc-h12-x-bar")
        clone = extensions.copy()
        clone.set_unicode_attribute("baz")
        clone.set_transform_field("m0", "ungegn")
        clone.remove_private_value("bar")
        assert str(extensions) == "t-ja-u-foo-hc-h12-x-bar"
        assert clone != extensions


class TestRecords:
    """Test the per-kind records directly."""

    def test_unicode_record_str(self) -> None:
        """UnicodeExtension serializes with its singleton."""
        unicode = UnicodeExtension()
        assert str(unicode) == ""
        unicode.set_value("nu", "latn")
        assert str(unicode) == "u-nu-latn"

    def test_transform_record_empty(self) -> None:
        """An empty TransformExtension serializes to the empty string."""
        assert str(TransformExtension()) == ""

    def test_private_record_empty(self) -> None:
        """An empty PrivateExtension serializes to the empty string."""
        assert str(PrivateExtension()) == ""
