"""Resource loading infrastructure for LanguageDictionary.

Finds the Localizable.strings files of an application bundle and turns
them into flat key/template mappings. Compiled apps ship string tables
as binary property lists, so every load goes through a conversion step
that writes a JSON rendering to a scratch file.

Components:
    ResourceConverter - Protocol for the binary-to-JSON conversion step
    PlutilConverter - Runs ``plutil -convert json`` (macOS)
    PlistlibConverter - Reads binary/XML plists with the standard library
    default_converter - plutil when available, plistlib otherwise
    get_l10n_resource_files - Locate Localizable.strings in each .lproj folder
    extract_language_name - Locale folder name of a resource file
    read_content_from_binary_file - Convert, read, normalize and parse one file

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import plistlib
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
from xml.parsers.expat import ExpatError

from lprojmatch.constants import (
    CONTENT_ENCODING,
    LPROJ_SUFFIX,
    PLUTIL_CONVERT_ARGS,
    PLUTIL_EXECUTABLE,
    RESOURCE_FILENAME,
    SCRATCH_FILENAME,
)
from lprojmatch.diagnostics import (
    ConversionError,
    ErrorTemplate,
    MalformedContentError,
    MissingResourceError,
)
from lprojmatch.localization.matching import normalize_text
from lprojmatch.localization.types import LocaleName, StringKey, Template

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceConverter",
    # Concrete converters
    "PlutilConverter",
    "PlistlibConverter",
    "default_converter",
    # Bundle layout
    "extract_language_name",
    "get_l10n_resource_files",
    # Content
    "parse_content",
    "read_content_from_binary_file",
]

logger = logging.getLogger(__name__)


class ResourceConverter(Protocol):
    """Protocol for converting a localization resource to JSON.

    Implementations read ``source`` and write a UTF-8 JSON object of
    string values to ``destination``. They must block until the file is
    complete.

    This is a Protocol (structural typing) rather than ABC so that tests
    and callers can pass any object with a matching convert() method.

    Example:
        >>> class JsonCopy:
        ...     def convert(self, source: Path, destination: Path) -> None:
        ...         destination.write_bytes(source.read_bytes())
    """

    def convert(self, source: Path, destination: Path) -> None:
        """Write the JSON rendering of source to destination.

        Raises:
            ConversionError: If the resource cannot be converted
        """


@dataclass(frozen=True, slots=True)
class PlutilConverter:
    """Converter backed by Apple's ``plutil`` tool.

    Handles every format plutil understands, including old-style text
    .strings files from un-compiled projects.

    Attributes:
        executable: plutil command name or path
        timeout: Seconds to wait for plutil, None to wait indefinitely
    """

    executable: str = PLUTIL_EXECUTABLE
    timeout: float | None = None

    def command(self, source: Path, destination: Path) -> list[str]:
        """Command line converting source into destination."""
        return [
            self.executable,
            *PLUTIL_CONVERT_ARGS,
            "-o",
            str(destination.absolute()),
            str(source.absolute()),
        ]

    def convert(self, source: Path, destination: Path) -> None:
        """Run plutil and wait for it to finish.

        Raises:
            ConversionError: If plutil is missing, exits non-zero or times out
        """
        command = self.command(source, destination)
        logger.debug("Running %s", " ".join(command))
        try:
            subprocess.run(command, check=True, capture_output=True, timeout=self.timeout)
        except FileNotFoundError as e:
            raise ConversionError(
                ErrorTemplate.conversion_failed(str(source), f"{self.executable} not found"),
                path=str(source),
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode(CONTENT_ENCODING, errors="replace").strip()
            reason = f"exit status {e.returncode}" + (f": {stderr}" if stderr else "")
            raise ConversionError(
                ErrorTemplate.conversion_failed(str(source), reason), path=str(source)
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ConversionError(
                ErrorTemplate.conversion_failed(str(source), f"timed out after {e.timeout}s"),
                path=str(source),
            ) from e


@dataclass(frozen=True, slots=True)
class PlistlibConverter:
    """Converter using the standard library plist reader.

    Works on any host, but only for binary and XML property lists.
    """

    def convert(self, source: Path, destination: Path) -> None:
        """Read the plist and dump it as JSON.

        Raises:
            ConversionError: If source is unreadable, not a plist, or
                holds values JSON cannot represent
        """
        try:
            with source.open("rb") as f:
                data = plistlib.load(f)
            destination.write_text(
                json.dumps(data, ensure_ascii=False), encoding=CONTENT_ENCODING
            )
        except (OSError, ExpatError, plistlib.InvalidFileException, TypeError, ValueError) as e:
            raise ConversionError(
                ErrorTemplate.conversion_failed(str(source), str(e)), path=str(source)
            ) from e


def default_converter() -> ResourceConverter:
    """plutil when it is on PATH, otherwise plistlib."""
    if shutil.which(PLUTIL_EXECUTABLE) is not None:
        return PlutilConverter()
    return PlistlibConverter()


def extract_language_name(resource_file: str | Path) -> LocaleName:
    """Locale name of a resource file, from its parent folder.

    Example:
        >>> extract_language_name("App.app/German.lproj/Localizable.strings")
        'German'
    """
    return Path(resource_file).parent.name.removesuffix(LPROJ_SUFFIX)


def get_l10n_resource_files(app_bundle_dir: str | Path) -> list[Path]:
    """List the Localizable.strings file of every .lproj folder.

    Folders are visited in name order. The first folder missing its
    resource aborts the whole listing.

    Args:
        app_bundle_dir: The application under test, e.g. /A/B/C/xxx.app

    Returns:
        One resource path per locale folder

    Raises:
        MissingResourceError: If the bundle is not a directory, or a
            locale folder has no Localizable.strings
    """
    bundle = Path(app_bundle_dir)
    if not bundle.is_dir():
        raise MissingResourceError(ErrorTemplate.bundle_missing(str(bundle)), path=str(bundle))

    folders = sorted(
        (p for p in bundle.iterdir() if p.is_dir() and p.name.endswith(LPROJ_SUFFIX)),
        key=lambda p: p.name,
    )

    res: list[Path] = []
    for folder in folders:
        resource = folder / RESOURCE_FILENAME
        if not resource.exists():
            raise MissingResourceError(
                ErrorTemplate.resource_missing(str(resource)), path=str(resource)
            )
        res.append(resource)
    return res


def parse_content(text: str, source: str | Path = "") -> dict[StringKey, Template]:
    """Parse converted JSON into a flat key/template mapping.

    Args:
        text: JSON object text, already normalized
        source: Resource path, used in error reporting

    Raises:
        MalformedContentError: If text is not a JSON object of strings
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedContentError(
            ErrorTemplate.content_malformed(str(source), str(e)), path=str(source)
        ) from e

    if not isinstance(data, dict):
        raise MalformedContentError(
            ErrorTemplate.content_malformed(
                str(source), f"expected an object, got {type(data).__name__}"
            ),
            path=str(source),
        )

    for key, value in data.items():
        if not isinstance(value, str):
            raise MalformedContentError(
                ErrorTemplate.content_malformed(
                    str(source), f"value of '{key}' is {type(value).__name__}, not a string"
                ),
                path=str(source),
            )
    return data


def read_content_from_binary_file(
    resource_file: str | Path, converter: ResourceConverter | None = None
) -> dict[StringKey, Template]:
    """Load the content of a binary resource as a key/template mapping.

    The converter writes into a private scratch directory that is removed
    on every exit path, including conversion and parse failures.

    Args:
        resource_file: Localizable.strings to read
        converter: Conversion step; default_converter() when None

    Returns:
        NFKC-normalized mapping of keys to templates

    Raises:
        ConversionError: If conversion fails or output is not UTF-8
        MalformedContentError: If output is not a flat string table
    """
    source = Path(resource_file)
    converter = converter if converter is not None else default_converter()

    with tempfile.TemporaryDirectory(prefix="lprojmatch-") as scratch:
        destination = Path(scratch) / SCRATCH_FILENAME
        converter.convert(source, destination)

        try:
            raw = destination.read_bytes()
        except FileNotFoundError as e:
            raise ConversionError(
                ErrorTemplate.conversion_failed(str(source), "converter produced no output"),
                path=str(source),
            ) from e

        try:
            text = raw.decode(CONTENT_ENCODING)
        except UnicodeDecodeError as e:
            raise ConversionError(
                ErrorTemplate.conversion_failed(str(source), f"output is not UTF-8: {e}"),
                path=str(source),
            ) from e

        logger.debug("Converted %s (%d bytes)", source, len(raw))
        return parse_content(normalize_text(text), source)
