"""Multi-language localization of one application bundle.

ApplicationLocalization holds one LanguageDictionary per language an
app ships and resolves a locator written in a reference language into
the text the device displays in another language.

Key architectural decisions:
- Eager loading: every .lproj folder is converted at construction
- Fail-fast: the first missing, unrecognized or unreadable resource aborts
- Dictionaries keyed by locale; a second folder for the same language
  (English.lproj next to en.lproj) is ignored with a warning

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lprojmatch.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    LookupFailedError,
    OutputFormat,
    UnrecognizedLocaleError,
)
from lprojmatch.enums import MatchMode
from lprojmatch.localization.dictionary import LanguageDictionary, MatchResult
from lprojmatch.localization.loading import ResourceConverter, get_l10n_resource_files
from lprojmatch.localization.locales import LocaleIdentifier, LocaleTable

__all__ = ["ApplicationLocalization"]

logger = logging.getLogger(__name__)

_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)


class ApplicationLocalization:
    """All string tables of one application.

    Example - From a built app:
        >>> app = ApplicationLocalization.from_app_bundle("build/UICatalog.app")
        >>> app.localize("Shipping from: Berlin", source="en", target="de")
        ['Versand ab: Berlin']

    Example - Direct dictionaries:
        >>> en = LanguageDictionary("en")
        >>> en.load_content({"ok": "OK"})
        >>> fr = LanguageDictionary("fr")
        >>> fr.load_content({"ok": "D'accord"})
        >>> ApplicationLocalization([en, fr]).localize("OK", source="en", target="fr")
        ["D'accord"]

    Attributes:
        locales: Languages available, in load order
    """

    __slots__ = ("_dictionaries",)

    def __init__(self, dictionaries: Iterable[LanguageDictionary]) -> None:
        """Index dictionaries by language.

        Args:
            dictionaries: Loaded dictionaries; for repeated languages the
                first one wins
        """
        self._dictionaries: dict[LocaleIdentifier, LanguageDictionary] = {}
        for dictionary in dictionaries:
            if dictionary.language in self._dictionaries:
                logger.warning(
                    "Ignoring duplicate dictionary for %s (%s format)",
                    dictionary.language,
                    dictionary.naming_convention,
                )
                continue
            self._dictionaries[dictionary.language] = dictionary

    @classmethod
    def from_app_bundle(
        cls,
        app_bundle_dir: str | Path,
        *,
        converter: ResourceConverter | None = None,
        table: LocaleTable | None = None,
        match_mode: MatchMode = MatchMode.RAW,
    ) -> ApplicationLocalization:
        """Load every ``<language>.lproj/Localizable.strings`` of an app.

        Raises:
            MissingResourceError: If a locale folder lacks its resource
            UnrecognizedLocaleError: If a folder name isn't a known locale
            ConversionError: If a resource cannot be converted
            MalformedContentError: If converted content is not a string table
        """
        return cls(
            LanguageDictionary.create_from_resource_file(
                resource, converter=converter, table=table, match_mode=match_mode
            )
            for resource in get_l10n_resource_files(app_bundle_dir)
        )

    def __len__(self) -> int:
        return len(self._dictionaries)

    def __repr__(self) -> str:
        codes = ", ".join(locale.code for locale in self._dictionaries)
        return f"ApplicationLocalization(locales=[{codes}])"

    @property
    def locales(self) -> tuple[LocaleIdentifier, ...]:
        return tuple(self._dictionaries)

    @property
    def is_legacy_format(self) -> bool:
        """True if any language was loaded from a legacy-named folder."""
        return any(d.legacy_format for d in self._dictionaries.values())

    def has_locale(self, locale: LocaleIdentifier | str) -> bool:
        return any(self._matches(candidate, locale) for candidate in self._dictionaries)

    def get_dictionary(self, locale: LocaleIdentifier | str) -> LanguageDictionary:
        """Dictionary of a language.

        Args:
            locale: Identifier, short code or legacy name

        Raises:
            UnrecognizedLocaleError: If the app has no such language
        """
        for candidate, dictionary in self._dictionaries.items():
            if self._matches(candidate, locale):
                return dictionary
        name = str(locale)
        raise UnrecognizedLocaleError(ErrorTemplate.locale_unrecognized(name), name=name)

    def find_matches(self, text: str, locale: LocaleIdentifier | str) -> list[MatchResult]:
        """Keys of one language whose template could have produced text."""
        return self.get_dictionary(locale).find_matches(text)

    def localize(
        self,
        text: str,
        *,
        source: LocaleIdentifier | str,
        target: LocaleIdentifier | str,
    ) -> list[str]:
        """Every string the target language could display for text.

        Finds the keys of ``text`` in the source language, captures the
        placeholder values and formats the target template of each key
        with them. Keys the target lacks, or whose target template has a
        different number of placeholders, are skipped.

        Args:
            text: Label in the source language, e.g. "Shipping from: Berlin"
            source: Language text is written in
            target: Language displayed by the device

        Returns:
            Distinct candidate labels, empty if nothing matched
        """
        source_dictionary = self.get_dictionary(source)
        target_dictionary = self.get_dictionary(target)

        res: list[str] = []
        for match in source_dictionary.find_matches(text):
            try:
                translated = target_dictionary.translate(source_dictionary.capture_args(match))
            except LookupFailedError as e:
                # Missing key or a translation with a different placeholder count
                logger.debug(
                    "Skipping key '%s' for %s: %s",
                    match.key,
                    target_dictionary.language,
                    _LOG_FORMATTER.format(e.diagnostic) if e.diagnostic else e,
                )
                continue
            if translated not in res:
                res.append(translated)
        return res

    @staticmethod
    def _matches(candidate: LocaleIdentifier, locale: LocaleIdentifier | str) -> bool:
        if isinstance(locale, LocaleIdentifier):
            return candidate == locale
        return locale in (candidate.code, candidate.legacy_name)
