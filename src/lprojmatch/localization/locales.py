"""Supported locales and their .lproj folder names.

Xcode has named locale folders two ways over time: a verbose legacy
name (English.lproj, German.lproj) and a short language code (en.lproj,
de.lproj). A LocaleIdentifier carries both forms; a LocaleTable is the
closed set of identifiers an application may use, built from the
``data/locales.json`` mapping of code to legacy name.

Recognition is case-sensitive and whole-string. The table rejects any
mapping where a name would be recognized by both conventions, so for
any input exactly one of is_legacy_name / is_new_name holds, or neither.

Python 3.13+.
"""

from __future__ import annotations

import functools
import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from typing import TYPE_CHECKING

from lprojmatch.constants import LPROJ_SUFFIX
from lprojmatch.diagnostics import ErrorTemplate, UnrecognizedLocaleError
from lprojmatch.enums import NamingConvention
from lprojmatch.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

    from lprojmatch.localization.types import LocaleName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Types
    "LocaleIdentifier",
    "LocaleTable",
    # Default table
    "get_locale_table",
    # Recognition and construction against the default table
    "is_legacy_name",
    "is_new_name",
    "create_from_legacy_name",
    "create_from_new_name",
]

_TABLE_RESOURCE = "data/locales.json"


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """A supported display language.

    Attributes:
        code: Modern short-code form (e.g., 'de')
        legacy_name: Legacy verbose form (e.g., 'German')
    """

    code: str
    legacy_name: str

    def __str__(self) -> str:
        return self.code

    def name(self, convention: NamingConvention) -> LocaleName:
        """Return the folder name of this locale under a naming convention."""
        match convention:
            case NamingConvention.LEGACY:
                return self.legacy_name
            case NamingConvention.MODERN:
                return self.code

    def folder_name(self, convention: NamingConvention) -> str:
        """Return the .lproj folder name, e.g. 'German.lproj' or 'de.lproj'."""
        return f"{self.name(convention)}{LPROJ_SUFFIX}"

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale for this language's code."""
        return get_babel_locale(self.code)

    def display_name(self, locale: str | None = None) -> str:
        """Language name from CLDR data.

        Args:
            locale: Locale to render the name in. Defaults to the
                language itself (e.g., 'Deutsch' for de).

        Returns:
            Display name, or the legacy name when CLDR has none.
        """
        name = self.babel_locale.get_display_name(locale)
        return name if name else self.legacy_name


class LocaleTable:
    """Bidirectional lookup table of supported locales.

    Example:
        >>> table = LocaleTable.from_mapping({"de": "German", "fr": "French"})
        >>> table.is_legacy_name("German")
        True
        >>> table.create_from_new_name("fr").legacy_name
        'French'
    """

    __slots__ = ("_by_code", "_by_legacy_name")

    def __init__(self, locales: Iterable[LocaleIdentifier]) -> None:
        """Build the lookup indexes.

        Args:
            locales: Supported identifiers

        Raises:
            ValueError: If a code or legacy name is empty or duplicated, or
                if a name appears in both vocabularies
        """
        by_code: dict[str, LocaleIdentifier] = {}
        by_legacy_name: dict[str, LocaleIdentifier] = {}

        for locale in locales:
            if not locale.code or not locale.legacy_name:
                msg = f"Locale names cannot be empty: {locale!r}"
                raise ValueError(msg)
            if locale.code in by_code:
                msg = f"Duplicate locale code: '{locale.code}'"
                raise ValueError(msg)
            if locale.legacy_name in by_legacy_name:
                msg = f"Duplicate legacy locale name: '{locale.legacy_name}'"
                raise ValueError(msg)
            by_code[locale.code] = locale
            by_legacy_name[locale.legacy_name] = locale

        overlap = by_code.keys() & by_legacy_name.keys()
        if overlap:
            msg = f"Names recognized by both conventions: {sorted(overlap)}"
            raise ValueError(msg)

        self._by_code = by_code
        self._by_legacy_name = by_legacy_name

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> LocaleTable:
        """Build a table from a ``{code: legacy_name}`` mapping."""
        return cls(LocaleIdentifier(code, legacy) for code, legacy in mapping.items())

    @classmethod
    def load_default(cls) -> LocaleTable:
        """Build the table shipped with the package."""
        source = resources.files("lprojmatch.localization").joinpath(_TABLE_RESOURCE)
        return cls.from_mapping(json.loads(source.read_text(encoding="utf-8")))

    def __len__(self) -> int:
        return len(self._by_code)

    def __iter__(self) -> Iterator[LocaleIdentifier]:
        return iter(self._by_code.values())

    def __contains__(self, item: object) -> bool:
        return isinstance(item, LocaleIdentifier) and self._by_code.get(item.code) == item

    def __repr__(self) -> str:
        return f"LocaleTable({', '.join(self._by_code)})"

    @property
    def locales(self) -> tuple[LocaleIdentifier, ...]:
        """All supported identifiers, in table order."""
        return tuple(self._by_code.values())

    def is_legacy_name(self, name: str) -> bool:
        """Check whether name is a known legacy verbose name."""
        return name in self._by_legacy_name

    def is_new_name(self, name: str) -> bool:
        """Check whether name is a known modern short code."""
        return name in self._by_code

    def create_from_legacy_name(self, name: str) -> LocaleIdentifier:
        """Return the locale whose legacy name is ``name``.

        Raises:
            UnrecognizedLocaleError: If name is not a legacy name
        """
        try:
            return self._by_legacy_name[name]
        except KeyError:
            raise UnrecognizedLocaleError(
                ErrorTemplate.locale_unrecognized(name), name=name
            ) from None

    def create_from_new_name(self, name: str) -> LocaleIdentifier:
        """Return the locale whose short code is ``name``.

        Raises:
            UnrecognizedLocaleError: If name is not a modern code
        """
        try:
            return self._by_code[name]
        except KeyError:
            raise UnrecognizedLocaleError(
                ErrorTemplate.locale_unrecognized(name), name=name
            ) from None


@functools.cache
def get_locale_table() -> LocaleTable:
    """Return the process-wide default table, loaded on first use."""
    return LocaleTable.load_default()


def is_legacy_name(name: str) -> bool:
    """Check name against the default table's legacy vocabulary."""
    return get_locale_table().is_legacy_name(name)


def is_new_name(name: str) -> bool:
    """Check name against the default table's short codes."""
    return get_locale_table().is_new_name(name)


def create_from_legacy_name(name: str) -> LocaleIdentifier:
    """Look up a legacy name in the default table."""
    return get_locale_table().create_from_legacy_name(name)


def create_from_new_name(name: str) -> LocaleIdentifier:
    """Look up a short code in the default table."""
    return get_locale_table().create_from_new_name(name)
