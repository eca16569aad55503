"""Localization package for iOS string tables.

Provides the full matching stack: type aliases, supported locales,
resource loading, single-language dictionaries and the per-application
orchestrator.

Submodules:
    types       - PEP 695 type aliases (LocaleName, StringKey, Template, StringTable)
    locales     - LocaleIdentifier, LocaleTable and default-table helpers
    matching    - Normalization, pattern derivation, reverse formatting
    loading     - ResourceConverter protocol, converters, bundle discovery
    dictionary  - LanguageDictionary, MatchResult
    application - ApplicationLocalization (multi-language orchestration)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from lprojmatch.enums import MatchMode, NamingConvention
from lprojmatch.localization.application import ApplicationLocalization
from lprojmatch.localization.dictionary import LanguageDictionary, MatchResult
from lprojmatch.localization.loading import (
    PlistlibConverter,
    PlutilConverter,
    ResourceConverter,
    default_converter,
    extract_language_name,
    get_l10n_resource_files,
    read_content_from_binary_file,
)
from lprojmatch.localization.locales import (
    LocaleIdentifier,
    LocaleTable,
    create_from_legacy_name,
    create_from_new_name,
    get_locale_table,
    is_legacy_name,
    is_new_name,
)
from lprojmatch.localization.matching import build_match_pattern, normalize_text
from lprojmatch.localization.types import LocaleName, StringKey, StringTable, Template

__all__ = [
    # Orchestration
    "ApplicationLocalization",
    "LanguageDictionary",
    "MatchResult",
    "MatchMode",
    # Locales
    "LocaleIdentifier",
    "LocaleTable",
    "NamingConvention",
    "get_locale_table",
    "is_legacy_name",
    "is_new_name",
    "create_from_legacy_name",
    "create_from_new_name",
    # Loading
    "ResourceConverter",
    "PlutilConverter",
    "PlistlibConverter",
    "default_converter",
    "extract_language_name",
    "get_l10n_resource_files",
    "read_content_from_binary_file",
    # Matching
    "build_match_pattern",
    "normalize_text",
    # Type aliases for user code type annotations
    "LocaleName",
    "StringKey",
    "StringTable",
    "Template",
]
