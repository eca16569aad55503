"""Locale utilities for .lproj code to Babel conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling so lookups against Babel's CLDR data
use one consistent form.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert an Xcode/BCP-47 locale code to POSIX format for Babel.

    Xcode folder codes use hyphens for scripts and regions (zh-Hans, pt-BR),
    while Babel/POSIX uses underscores (zh_Hans, pt_BR).

    Args:
        locale_code: Locale code (e.g., "en", "pt-BR", "zh-Hans")

    Returns:
        POSIX-formatted locale code (e.g., "en", "pt_BR", "zh_Hans")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()
