"""Localization exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions may store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocalizationError(Exception):
    """Base exception for all lprojmatch errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnrecognizedLocaleError(LocalizationError):
    """Locale name matches neither the legacy nor the modern convention.

    Attributes:
        name: The rejected locale or folder name
    """

    def __init__(self, message: str | Diagnostic, *, name: str = "") -> None:
        super().__init__(message)
        self.name = name


class ResourceError(LocalizationError):
    """Base class for failures while loading a localization resource.

    Attributes:
        path: Filesystem path of the resource involved
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class MissingResourceError(ResourceError):
    """Expected Localizable.strings absent from an .lproj folder."""


class ConversionError(ResourceError):
    """External conversion step failed or produced unreadable output."""


class MalformedContentError(ResourceError):
    """Converted content is not a flat object of string values."""


class LookupFailedError(LocalizationError):
    """Base class for failures while reverse-formatting a match.

    Attributes:
        key: String table key involved
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "") -> None:
        super().__init__(message)
        self.key = key


class MissingKeyError(LookupFailedError):
    """Translate requested for a key absent from the loaded table."""


class ArgumentCountMismatchError(LookupFailedError):
    """Placeholder count in a template differs from the captured argument count.

    Attributes:
        expected: Number of placeholders in the template
        received: Number of arguments supplied
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str = "",
        expected: int = 0,
        received: int = 0,
    ) -> None:
        super().__init__(message, key=key)
        self.expected = expected
        self.received = received
