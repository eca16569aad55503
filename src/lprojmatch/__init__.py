"""lprojmatch - Locate iOS UI elements by their label in any language.

Resolves a free-text locator written in a reference language against the
Localizable.strings tables of an application, so that a UI test can find
an element by its English label while the device displays German.

Public API:
    LanguageDictionary - One language's string table with match/translate
    ApplicationLocalization - All languages of an app bundle
    MatchResult - A key whose template could have produced a string
    LocaleIdentifier - Supported language with legacy and modern folder names
    MatchMode - Raw (historical) or escaped pattern derivation

Exceptions:
    LocalizationError - Base exception class
    UnrecognizedLocaleError - Folder name matches no supported language
    MissingResourceError - .lproj folder without Localizable.strings
    ConversionError - Binary plist could not be converted
    MalformedContentError - Converted content is not a string table
    MissingKeyError - Key absent from a dictionary
    ArgumentCountMismatchError - Placeholders and arguments disagree

Submodules:
    lprojmatch.localization - Dictionaries, locales, loaders and matching
    lprojmatch.diagnostics - Error types, codes and formatting
    lprojmatch.locale_utils - Babel locale helpers
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ArgumentCountMismatchError,
    ConversionError,
    LocalizationError,
    MalformedContentError,
    MissingKeyError,
    MissingResourceError,
    UnrecognizedLocaleError,
)
from .enums import MatchMode, NamingConvention
from .localization import (
    ApplicationLocalization,
    LanguageDictionary,
    LocaleIdentifier,
    MatchResult,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lprojmatch")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ApplicationLocalization",
    "ArgumentCountMismatchError",
    "ConversionError",
    "LanguageDictionary",
    "LocaleIdentifier",
    "LocalizationError",
    "MalformedContentError",
    "MatchMode",
    "MatchResult",
    "MissingKeyError",
    "MissingResourceError",
    "NamingConvention",
    "UnrecognizedLocaleError",
    "__version__",
]
