"""Tests for LocaleIdentifier and LocaleTable.

Covers recognition of legacy and modern folder names, construction from
either form, table validation, and the Babel-backed display helpers.
"""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from lprojmatch.diagnostics import DiagnosticCode, UnrecognizedLocaleError
from lprojmatch.enums import NamingConvention
from lprojmatch.localization.locales import (
    LocaleIdentifier,
    LocaleTable,
    create_from_legacy_name,
    create_from_new_name,
    get_locale_table,
    is_legacy_name,
    is_new_name,
)

ALL_LOCALES = get_locale_table().locales


class TestDefaultTable:
    """The table shipped in data/locales.json."""

    def test_table_is_not_empty(self) -> None:
        assert len(get_locale_table()) >= 10

    def test_table_is_cached(self) -> None:
        assert get_locale_table() is get_locale_table()

    def test_known_pairs(self) -> None:
        table = get_locale_table()
        assert table.create_from_new_name("en").legacy_name == "English"
        assert table.create_from_new_name("fr").legacy_name == "French"
        assert table.create_from_new_name("de").legacy_name == "German"
        assert table.create_from_legacy_name("Japanese").code == "ja"

    @pytest.mark.parametrize("locale", ALL_LOCALES, ids=str)
    def test_every_code_is_known_to_babel(self, locale: LocaleIdentifier) -> None:
        assert isinstance(locale.babel_locale, Locale)
        assert locale.babel_locale.language == locale.code.split("-")[0]

    def test_repr_lists_codes(self) -> None:
        assert "en" in repr(get_locale_table())


class TestRecognition:
    """is_legacy_name / is_new_name."""

    @pytest.mark.parametrize("locale", ALL_LOCALES, ids=str)
    def test_legacy_name_recognized_only_as_legacy(self, locale: LocaleIdentifier) -> None:
        assert is_legacy_name(locale.legacy_name)
        assert not is_new_name(locale.legacy_name)

    @pytest.mark.parametrize("locale", ALL_LOCALES, ids=str)
    def test_code_recognized_only_as_new(self, locale: LocaleIdentifier) -> None:
        assert is_new_name(locale.code)
        assert not is_legacy_name(locale.code)

    @pytest.mark.parametrize("name", ["english", "ENGLISH", "EN", " en", "en ", "English.lproj"])
    def test_recognition_is_case_sensitive_and_whole_string(self, name: str) -> None:
        assert not is_legacy_name(name)
        assert not is_new_name(name)

    @given(st.text(max_size=30))
    def test_never_both(self, name: str) -> None:
        assert not (is_legacy_name(name) and is_new_name(name))


class TestConstruction:
    """create_from_legacy_name / create_from_new_name."""

    @pytest.mark.parametrize("locale", ALL_LOCALES, ids=str)
    def test_round_trip_between_conventions(self, locale: LocaleIdentifier) -> None:
        assert create_from_legacy_name(locale.legacy_name) == locale
        assert create_from_new_name(locale.code) == locale

    def test_unknown_legacy_name_raises(self) -> None:
        with pytest.raises(UnrecognizedLocaleError, match="Klingon isn't recognized") as exc:
            create_from_legacy_name("Klingon")
        assert exc.value.name == "Klingon"
        assert exc.value.diagnostic is not None
        assert exc.value.diagnostic.code == DiagnosticCode.LOCALE_UNRECOGNIZED

    def test_code_is_not_a_legacy_name(self) -> None:
        with pytest.raises(UnrecognizedLocaleError):
            create_from_legacy_name("en")

    def test_legacy_name_is_not_a_code(self) -> None:
        with pytest.raises(UnrecognizedLocaleError):
            create_from_new_name("English")


class TestLocaleIdentifier:
    """Folder names and display helpers."""

    def test_folder_names(self) -> None:
        german = create_from_new_name("de")
        assert german.folder_name(NamingConvention.LEGACY) == "German.lproj"
        assert german.folder_name(NamingConvention.MODERN) == "de.lproj"

    def test_str_is_code(self) -> None:
        assert str(create_from_legacy_name("French")) == "fr"

    def test_display_name_in_english(self) -> None:
        assert create_from_new_name("de").display_name("en") == "German"

    def test_display_name_defaults_to_own_language(self) -> None:
        assert create_from_new_name("de").display_name() == "Deutsch"

    def test_identifiers_are_hashable_values(self) -> None:
        assert LocaleIdentifier("de", "German") == create_from_new_name("de")
        assert len({LocaleIdentifier("de", "German"), create_from_new_name("de")}) == 1


class TestCustomTable:
    """LocaleTable built from explicit data."""

    def test_from_mapping(self) -> None:
        table = LocaleTable.from_mapping({"de": "German", "fr": "French"})
        assert len(table) == 2
        assert table.is_legacy_name("German")
        assert table.is_new_name("fr")
        assert not table.is_new_name("en")
        assert [locale.code for locale in table] == ["de", "fr"]

    def test_contains(self) -> None:
        table = LocaleTable.from_mapping({"de": "German"})
        assert LocaleIdentifier("de", "German") in table
        assert LocaleIdentifier("de", "Deutsch") not in table
        assert "de" not in table

    def test_duplicate_legacy_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate legacy locale name"):
            LocaleTable.from_mapping({"nb": "Norwegian", "no": "Norwegian"})

    def test_duplicate_code_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate locale code"):
            LocaleTable([LocaleIdentifier("de", "German"), LocaleIdentifier("de", "Deutsch")])

    def test_overlapping_vocabularies_rejected(self) -> None:
        with pytest.raises(ValueError, match="both conventions"):
            LocaleTable.from_mapping({"de": "German", "German": "Allemand"})

    def test_empty_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            LocaleTable.from_mapping({"": "Nothing"})
