"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "LocaleName",
    "StringKey",
    "StringTable",
    "Template",
]

LocaleName: TypeAlias = str
"""Locale folder name without suffix, legacy or modern (e.g., 'German', 'de')."""

StringKey: TypeAlias = str
"""Key of a Localizable.strings entry (e.g., 'shipping.from')."""

Template: TypeAlias = str
"""Localized value, possibly containing %@ / %d placeholders."""

StringTable: TypeAlias = Mapping[StringKey, Template]
"""Flat key to template mapping of one language."""
