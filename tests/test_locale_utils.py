"""Tests for locale_utils.py.

Covers normalize_locale, get_babel_locale and clear_locale_cache.
Includes property-based tests with Hypothesis for locale normalization.
"""

from __future__ import annotations

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from lprojmatch.locale_utils import clear_locale_cache, get_babel_locale, normalize_locale


class TestNormalizeLocale:
    """Xcode codes to Babel's POSIX form."""

    def test_region(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_script(self) -> None:
        assert normalize_locale("zh-Hans") == "zh_Hans"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en") == "en"

    @given(st.text(alphabet="abcdefgABCDEFG-_", max_size=12))
    def test_no_hyphen_left(self, code: str) -> None:
        result = normalize_locale(code)
        assert "-" not in result
        assert len(result) == len(code)

    @given(st.text(alphabet="abcdefgABCDEFG-_", max_size=12))
    def test_idempotent(self, code: str) -> None:
        once = normalize_locale(code)
        assert normalize_locale(once) == once


class TestGetBabelLocale:
    """Cached Babel lookups."""

    def test_language_only(self) -> None:
        locale = get_babel_locale("fr")
        assert isinstance(locale, Locale)
        assert locale.language == "fr"
        assert locale.territory is None

    def test_hyphenated_region(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert locale.language == "pt"
        assert locale.territory == "BR"

    def test_caching(self) -> None:
        assert get_babel_locale("de") is get_babel_locale("de")

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx")


class TestClearLocaleCache:
    """Cache reset."""

    def test_clears(self) -> None:
        get_babel_locale("en")
        assert get_babel_locale.cache_info().currsize > 0
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0

    def test_idempotent(self) -> None:
        clear_locale_cache()
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0
