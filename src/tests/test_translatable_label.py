"""
Tests for the TranslatableLabel model.

Tests cover:
- Exact-match lookup with case-normalized language codes
- Upsert behavior
- Missing translations
- Building labels from resource records
"""

from src.models.translatable_label import (
    TranslatableLabel,
    label_from_record,
    normalize_language,
)


class TestTranslatableLabel:
    """Test label lookup and mutation."""

    def test_get_existing_language(self):
        """Test lookup of a present translation."""
        label = TranslatableLabel([("EN", "Hello"), ("FR", "Bonjour")])
        assert label.get("EN") == "Hello"
        assert label.get("FR") == "Bonjour"

    def test_get_is_case_insensitive_on_language(self):
        """Test language codes are normalized to upper case."""
        label = TranslatableLabel([("fr", "Bonjour")])
        assert label.get("FR") == "Bonjour"
        assert label.get("fr") == "Bonjour"
        assert label.get(" Fr ") == "Bonjour"

    def test_missing_language_returns_none(self):
        """Test a missing translation is None, not an error, and has no fallback."""
        label = TranslatableLabel([("FR", "Bonjour")])
        assert label.get("EN") is None

    def test_set_upserts(self):
        """Test set adds and replaces translations."""
        label = TranslatableLabel()
        label.set("EN", "Hello")
        label.set("en", "Hi")
        label.set("DE", "Hallo")
        assert label.get("EN") == "Hi"
        assert label.get("DE") == "Hallo"
        assert label.languages() == ("EN", "DE")

    def test_none_texts_are_ignored(self):
        """Test pairs with a None text do not create a translation."""
        label = TranslatableLabel([("EN", None), ("FR", "Bonjour")])
        assert label.languages() == ("FR",)

    def test_equality(self):
        """Test labels compare by their translations."""
        assert TranslatableLabel([("EN", "a")]) == TranslatableLabel([("en", "a")])
        assert TranslatableLabel([("EN", "a")]) != TranslatableLabel([("EN", "b")])


class TestNormalizeLanguage:
    """Test language code normalization."""

    def test_normalize(self):
        assert normalize_language("en") == "EN"
        assert normalize_language(" fr ") == "FR"
        assert normalize_language(None) == ""


class TestLabelFromRecord:
    """Test building labels from per-language resource fields."""

    def test_reads_suffixed_fields(self):
        """Test ObjectEn/ObjectFr fields become EN/FR translations."""
        label = label_from_record({"ObjectEn": "Ant", "ObjectFr": "Fourmi"}, "Object")
        assert label.get("EN") == "Ant"
        assert label.get("FR") == "Fourmi"

    def test_missing_field_is_skipped(self):
        """Test an absent language field leaves that language missing."""
        label = label_from_record({"LabelFr": "Objet"}, "Label")
        assert label.get("EN") is None
        assert label.get("FR") == "Objet"

    def test_custom_suffixes(self):
        """Test explicit language suffixes."""
        label = label_from_record({"NameDe": "Ameise"}, "Name", {"DE": "De"})
        assert label.get("DE") == "Ameise"

    def test_non_string_values_are_stringified(self):
        """Test numeric field values become text."""
        label = label_from_record({"UnitSymbolEn": 42}, "UnitSymbol")
        assert label.get("EN") == "42"
