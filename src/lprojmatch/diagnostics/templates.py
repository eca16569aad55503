"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://developer.apple.com/documentation/xcode"

    @staticmethod
    def locale_unrecognized(name: str) -> Diagnostic:
        """Locale name matches neither naming convention.

        Args:
            name: The locale or folder name that was rejected

        Returns:
            Diagnostic for LOCALE_UNRECOGNIZED
        """
        msg = f"{name} isn't recognized."
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNRECOGNIZED,
            message=msg,
            hint="Use a supported legacy name (e.g. 'English') or language code (e.g. 'en')",
            help_url=f"{ErrorTemplate._DOCS_BASE}/localization",
            locale_name=name,
        )

    @staticmethod
    def resource_missing(path: str) -> Diagnostic:
        """Localization resource absent from a locale folder.

        Args:
            path: The path where the resource was expected

        Returns:
            Diagnostic for RESOURCE_MISSING
        """
        msg = f"expected a l10n file here : {path}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_MISSING,
            message=msg,
            hint="Every .lproj folder of the application must contain Localizable.strings",
            path=path,
        )

    @staticmethod
    def bundle_missing(path: str) -> Diagnostic:
        """Application bundle directory absent or not a directory.

        Args:
            path: The bundle path that was given

        Returns:
            Diagnostic for RESOURCE_MISSING
        """
        msg = f"Application bundle not found: {path}"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_MISSING,
            message=msg,
            hint="Pass the path of the built .app directory",
            path=path,
        )

    @staticmethod
    def conversion_failed(path: str, reason: str) -> Diagnostic:
        """Binary-to-text conversion of a resource failed.

        Args:
            path: Resource file that was being converted
            reason: Short description of the failure

        Returns:
            Diagnostic for CONVERSION_FAILED
        """
        msg = f"Failed to convert '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_FAILED,
            message=msg,
            hint="Check that the file is a valid property list and that plutil is available",
            path=path,
        )

    @staticmethod
    def content_malformed(path: str, reason: str) -> Diagnostic:
        """Converted resource content is not a flat string table.

        Args:
            path: Resource file whose content was parsed
            reason: Short description of the problem

        Returns:
            Diagnostic for CONTENT_MALFORMED
        """
        msg = f"Malformed content in '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONTENT_MALFORMED,
            message=msg,
            hint="Localizable.strings must map every key to a string value",
            path=path,
        )

    @staticmethod
    def key_not_found(key: str, locale_name: str) -> Diagnostic:
        """Key absent from a loaded string table.

        Args:
            key: The key that was looked up
            locale_name: Locale of the dictionary searched

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Key '{key}' not found in {locale_name} dictionary"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint=f"Check that '{key}' is localized for {locale_name}",
            locale_name=locale_name,
            key=key,
        )

    @staticmethod
    def argument_count_mismatch(key: str, expected: int, received: int) -> Diagnostic:
        """Captured arguments do not fit the template's placeholders.

        Args:
            key: The key being translated
            expected: Number of placeholders in the template
            received: Number of arguments supplied

        Returns:
            Diagnostic for ARGUMENT_COUNT_MISMATCH
        """
        msg = (
            f"Template for '{key}' has {expected} placeholder(s) "
            f"but {received} argument(s) were supplied"
        )
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_COUNT_MISMATCH,
            message=msg,
            hint="Capture arguments from a match on the same key before translating",
            key=key,
            expected=str(expected),
            received=str(received),
        )

    @staticmethod
    def pattern_invalid(key: str, reason: str) -> Diagnostic:
        """Template could not be compiled into a match pattern.

        Args:
            key: The key whose template was skipped
            reason: Compiler error message

        Returns:
            Diagnostic for PATTERN_INVALID (warning severity)
        """
        msg = f"Template for '{key}' is not a valid pattern: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID,
            message=msg,
            hint="Use MatchMode.ESCAPED to match regex metacharacters literally",
            key=key,
            severity="warning",
        )
