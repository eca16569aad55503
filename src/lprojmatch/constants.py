"""Shared constants for lprojmatch.

This module provides centralized configuration constants used across
the localization and diagnostics packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Bundle layout: Folder suffix and resource file name inside an app bundle
- Text handling: Unicode normalization form applied to every string
- Placeholders: Runtime substitution markers and the wildcard replacing them
- Conversion: External command used to turn binary plists into JSON
- Cache limits: Memory bounds for compiled match patterns

Python 3.13+. Zero external dependencies.
"""

from typing import Literal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundle layout
    "LPROJ_SUFFIX",
    "RESOURCE_FILENAME",
    # Text handling
    "NORMALIZATION_FORM",
    "CONTENT_ENCODING",
    # Placeholders
    "PLACEHOLDERS",
    "ESCAPED_PERCENT",
    "PLACEHOLDER_PATTERN",
    # Conversion
    "PLUTIL_EXECUTABLE",
    "PLUTIL_CONVERT_ARGS",
    "SCRATCH_FILENAME",
    # Cache limits
    "PATTERN_CACHE_SIZE",
]

# ============================================================================
# BUNDLE LAYOUT
# ============================================================================

# Xcode stores one folder per language: English.lproj, fr.lproj, ...
LPROJ_SUFFIX: str = ".lproj"

# The string table looked up in every locale folder.
RESOURCE_FILENAME: str = "Localizable.strings"

# ============================================================================
# TEXT HANDLING
# ============================================================================

# Compatibility composition. Applied to converted resources, templates and
# candidate text alike so that ligatures, full-width forms and combining
# sequences compare equal to what the device renders.
NORMALIZATION_FORM: Literal["NFKC"] = "NFKC"

CONTENT_ENCODING: str = "utf-8"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# %@ - any object substituted at runtime, %d - any integer.
PLACEHOLDERS: tuple[str, ...] = ("%@", "%d")

# printf escape for a literal percent sign. Never starts a placeholder, so
# "100%%d" holds no placeholder while "%%%@" holds one.
ESCAPED_PERCENT: str = "%%"

# Percent tokens, scanned left to right: the escape or a placeholder.
PLACEHOLDER_PATTERN: str = "%%|%@|%d"

# ============================================================================
# CONVERSION
# ============================================================================

PLUTIL_EXECUTABLE: str = "plutil"

# plutil -convert json -o <destination> <source>
PLUTIL_CONVERT_ARGS: tuple[str, ...] = ("-convert", "json")

# Name of the converted file inside the per-load scratch directory.
SCRATCH_FILENAME: str = "Localizable.json"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Compiled match patterns, keyed by (template, mode). A typical app ships
# a few hundred strings per language; several languages fit comfortably.
PATTERN_CACHE_SIZE: int = 4096
