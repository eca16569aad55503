"""Diagnostic formatting service.

Centralizes diagnostic output formatting. Exceptions render in the
multi-line Rust style; log records use the single-line form.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format, used in log records


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.locale_unrecognized("Klingon")
        >>> print(formatter.format(diagnostic))
        error[LOCALE_UNRECOGNIZED]: Klingon isn't recognized.
          = locale: Klingon
          = help: Use a supported legacy name (e.g. 'English') or language code (e.g. 'en')
          = note: see https://developer.apple.com/documentation/xcode/localization

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        LOCALE_UNRECOGNIZED: Klingon isn't recognized.
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[KEY_NOT_FOUND]: Key 'greeting' not found in de dictionary
              = locale: de
              = key: greeting
              = help: Check that 'greeting' is localized for de
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.path:
            parts.append(f"  --> {diagnostic.path}")

        if diagnostic.locale_name:
            parts.append(f"  = locale: {diagnostic.locale_name}")

        if diagnostic.key:
            parts.append(f"  = key: {diagnostic.key}")

        if diagnostic.expected:
            parts.append(f"  = expected: {diagnostic.expected}")

        if diagnostic.received:
            parts.append(f"  = received: {diagnostic.received}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Line breaks in the message are escaped so one diagnostic stays one
        log line.

        Example output:
            KEY_NOT_FOUND: Key 'greeting' not found in de dictionary
        """
        message = diagnostic.message.replace("\r", "\\r").replace("\n", "\\n")
        return f"{diagnostic.code.name}: {message}"
