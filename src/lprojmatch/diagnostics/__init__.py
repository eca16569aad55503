"""Diagnostic system for localization errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArgumentCountMismatchError,
    ConversionError,
    LocalizationError,
    LookupFailedError,
    MalformedContentError,
    MissingKeyError,
    MissingResourceError,
    ResourceError,
    UnrecognizedLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArgumentCountMismatchError",
    "ConversionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocalizationError",
    "LookupFailedError",
    "MalformedContentError",
    "MissingKeyError",
    "MissingResourceError",
    "OutputFormat",
    "ResourceError",
    "UnrecognizedLocaleError",
]
