"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (unrecognized folder names)
        2000-2999: Resource errors (missing files, conversion, content)
        3000-3999: Lookup errors (missing keys, substitution arguments)
        4000-4999: Matching warnings (templates skipped during a scan)
    """

    # Locale errors (1000-1999)
    LOCALE_UNRECOGNIZED = 1001

    # Resource errors (2000-2999)
    RESOURCE_MISSING = 2001
    CONVERSION_FAILED = 2002
    CONTENT_MALFORMED = 2003

    # Lookup errors (3000-3999)
    KEY_NOT_FOUND = 3001
    ARGUMENT_COUNT_MISMATCH = 3002

    # Matching warnings (4000-4999)
    PATTERN_INVALID = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        path: Filesystem location involved in the error
        locale_name: Locale or folder name involved in the error
        key: String table key involved in the error
        expected: Expected value (argument counts)
        received: Actual value received (argument counts)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    path: str | None = None
    locale_name: str | None = None
    key: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[RESOURCE_MISSING]: Expected a localization file at 'App.app/fr.lproj/...'
              --> App.app/fr.lproj/Localizable.strings
              = help: Every .lproj folder must contain Localizable.strings

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
