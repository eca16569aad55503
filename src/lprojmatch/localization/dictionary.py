"""Single-language string table with fuzzy matching.

Represents the Apple localisation of an iOS native app for one language.
In Xcode this is the Localizable.strings file of a ``<language>.lproj``
folder.

Architecture:
    LanguageDictionary owns one locale's key/template mapping. It is
    constructed for exactly one locale, loaded once, then queried
    read-only, so concurrent reads after loading are safe.

    Equality and hashing use the locale only. Two dictionaries for the
    same language compare equal whatever their content, which lets sets
    and dict keys de-duplicate dictionaries by language.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from lprojmatch.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    MissingKeyError,
    OutputFormat,
    UnrecognizedLocaleError,
)
from lprojmatch.enums import MatchMode, NamingConvention
from lprojmatch.localization.loading import (
    ResourceConverter,
    extract_language_name,
    read_content_from_binary_file,
)
from lprojmatch.localization.locales import LocaleIdentifier, LocaleTable, get_locale_table
from lprojmatch.localization.matching import (
    captured_args,
    format_template,
    match_template,
)
from lprojmatch.localization.types import LocaleName, StringKey, StringTable, Template

__all__ = ["LanguageDictionary", "MatchResult"]

logger = logging.getLogger(__name__)

_LOG_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """One key whose template could have produced a candidate string.

    Attributes:
        locale: Language of the dictionary that matched
        key: Matching key
        template: Template stored under key
        candidate_text: Text that was matched
        captured_args: Placeholder values, empty until captured
    """

    locale: LocaleIdentifier
    key: StringKey
    template: Template
    candidate_text: str
    captured_args: tuple[str, ...] = ()

    def with_args(self, *args: object) -> MatchResult:
        """Copy of this result carrying the given substitution arguments."""
        return replace(self, captured_args=tuple(str(arg) for arg in args))


class LanguageDictionary:
    """Key/template mapping of one language, with match and translate.

    Example:
        >>> de = LanguageDictionary("de")
        >>> de.load_content({"greeting": "Hallo %@"})
        >>> [m.key for m in de.find_matches("Hallo Welt")]
        ['greeting']

    Attributes:
        language: Locale this dictionary is for
        legacy_format: True if built from a legacy verbose folder name
        match_mode: How templates are turned into match patterns
    """

    __slots__ = ("_content", "_language", "_legacy_format", "_match_mode")

    def __init__(
        self,
        language: LocaleName,
        *,
        table: LocaleTable | None = None,
        match_mode: MatchMode = MatchMode.RAW,
    ) -> None:
        """Create an empty dictionary for the language specified.

        Guesses the naming convention of the project structure: legacy
        (verbose name) is tried first, then modern (short code).

        Args:
            language: Locale folder name without suffix
            table: Supported locales; the package table when None
            match_mode: Pattern mode used by match() and find_matches()

        Raises:
            UnrecognizedLocaleError: If the language isn't recognized
        """
        table = table if table is not None else get_locale_table()

        if table.is_legacy_name(language):
            self._language = table.create_from_legacy_name(language)
            self._legacy_format = True
        elif table.is_new_name(language):
            self._language = table.create_from_new_name(language)
            self._legacy_format = False
        else:
            raise UnrecognizedLocaleError(
                ErrorTemplate.locale_unrecognized(language), name=language
            )

        self._match_mode = match_mode
        self._content: dict[StringKey, Template] = {}

    @classmethod
    def create_from_resource_file(
        cls,
        resource_file: str | Path,
        *,
        converter: ResourceConverter | None = None,
        table: LocaleTable | None = None,
        match_mode: MatchMode = MatchMode.RAW,
    ) -> LanguageDictionary:
        """Build a dictionary from a Localizable.strings file.

        The language comes from the parent ``.lproj`` folder name.

        Args:
            resource_file: Path to ``<language>.lproj/Localizable.strings``
            converter: Binary-to-JSON conversion step
            table: Supported locales
            match_mode: Pattern mode of the new dictionary

        Raises:
            UnrecognizedLocaleError: If the folder name isn't a known locale
            ConversionError: If the resource cannot be converted
            MalformedContentError: If the converted content is not a string table
        """
        res = cls(extract_language_name(resource_file), table=table, match_mode=match_mode)
        res.load_content(read_content_from_binary_file(resource_file, converter))
        logger.info(
            "Loaded %d strings for %s from %s (%s format)",
            len(res),
            res.language,
            resource_file,
            res.naming_convention,
        )
        return res

    def load_content(self, content: StringTable) -> None:
        """Replace the whole mapping with ``content``."""
        self._content = dict(content)

    @property
    def language(self) -> LocaleIdentifier:
        """The language this dictionary is for."""
        return self._language

    @property
    def legacy_format(self) -> bool:
        """Whether the l10n folder used the legacy verbose name.

        See http://stackoverflow.com/questions/7051120/why-doesnt-my-file-move-into-en-lproj-but-instead-into-a-new-english-lproj
        """
        return self._legacy_format

    @property
    def naming_convention(self) -> NamingConvention:
        return NamingConvention.LEGACY if self._legacy_format else NamingConvention.MODERN

    @property
    def match_mode(self) -> MatchMode:
        return self._match_mode

    def __len__(self) -> int:
        return len(self._content)

    def __contains__(self, key: object) -> bool:
        return key in self._content

    def __iter__(self) -> Iterator[StringKey]:
        return iter(self._content)

    def keys(self) -> list[StringKey]:
        return list(self._content)

    def get(self, key: StringKey) -> Template | None:
        return self._content.get(key)

    def content(self) -> Mapping[StringKey, Template]:
        """Read-only copy of the mapping."""
        return dict(self._content)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LanguageDictionary):
            return NotImplemented
        return self._language == other._language

    def __hash__(self) -> int:
        return hash(self._language)

    def __repr__(self) -> str:
        return (
            f"LanguageDictionary(language={self._language.code!r}, "
            f"legacy_format={self._legacy_format}, entries={len(self._content)})"
        )

    def match(self, candidate: str, template: Template) -> bool:
        """Whether candidate could have been produced by template.

        Templates that are not valid patterns never match.
        """
        try:
            return match_template(candidate, template, self._match_mode) is not None
        except re.error:
            return False

    def find_matches(self, candidate: str) -> list[MatchResult]:
        """Every key whose template could have produced candidate.

        The order of the results is unspecified. A template that does
        not compile is skipped and the scan continues.

        Args:
            candidate: Text observed on screen

        Returns:
            One MatchResult per matching key, without captured arguments
        """
        res: list[MatchResult] = []
        for key, template in self._content.items():
            try:
                found = match_template(candidate, template, self._match_mode)
            except re.error as e:
                diagnostic = ErrorTemplate.pattern_invalid(key, str(e))
                logger.debug("%s", _LOG_FORMATTER.format(diagnostic))
                continue
            if found is not None:
                res.append(MatchResult(self._language, key, template, candidate))
        return res

    def capture_args(self, result: MatchResult) -> MatchResult:
        """Fill ``captured_args`` from the placeholder values in the candidate.

        Args:
            result: A match produced by this dictionary

        Returns:
            Copy of result with captured_args set

        Raises:
            MissingKeyError: If result.key is not in this dictionary
            ValueError: If the candidate does not match the key's template
        """
        template = self._template_for(result.key)
        try:
            found = match_template(result.candidate_text, template, self._match_mode)
        except re.error as e:
            msg = f"Template for '{result.key}' is not a valid pattern: {e}"
            raise ValueError(msg) from e
        if found is None:
            msg = f"'{result.candidate_text}' does not match the template of '{result.key}'"
            raise ValueError(msg)
        return replace(result, captured_args=captured_args(found))

    def translate(self, result: MatchResult) -> str:
        """Format this language's template for result.key with its captured args.

        Args:
            result: Match, usually from another language's dictionary,
                carrying the arguments to substitute

        Returns:
            The string this language displays for the same key and values

        Raises:
            MissingKeyError: If result.key is not in this dictionary
            ArgumentCountMismatchError: If the placeholder count differs
                from len(result.captured_args)
        """
        template = self._template_for(result.key)
        return format_template(template, result.captured_args, key=result.key)

    def _template_for(self, key: StringKey) -> Template:
        try:
            return self._content[key]
        except KeyError:
            raise MissingKeyError(
                ErrorTemplate.key_not_found(key, self._language.code), key=key
            ) from None
