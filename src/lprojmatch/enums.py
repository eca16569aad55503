"""Enumerations for lprojmatch type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NamingConvention(StrEnum):
    """Naming scheme of a locale resource folder.

    StrEnum provides automatic string conversion: str(NamingConvention.LEGACY) == "legacy"
    """

    LEGACY = "legacy"
    """Verbose language name: English.lproj, German.lproj"""

    MODERN = "modern"
    """Short language code: en.lproj, de.lproj"""


class MatchMode(StrEnum):
    """How the literal part of a template is turned into a match pattern.

    StrEnum provides automatic string conversion: str(MatchMode.RAW) == "raw"
    """

    RAW = "raw"
    """Literal text is used as-is, so regex metacharacters act as operators.

    Historical behavior. Templates containing "(", "?", "+" and friends
    may match the wrong candidates or fail to compile (and are then skipped).
    """

    ESCAPED = "escaped"
    """Literal text is escaped; only placeholders become wildcards."""


__all__ = [
    "MatchMode",
    "NamingConvention",
]
