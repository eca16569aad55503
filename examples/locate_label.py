"""Locating a label across languages with lprojmatch.

This example builds a tiny application bundle in a temporary directory,
loads it, and resolves an English label into the text a German device
would display.

Note: Bundles are written as binary property lists with plistlib, so the
example runs on any host. On macOS the default converter is plutil.
"""

import logging
import plistlib
import tempfile
from pathlib import Path

from lprojmatch import ApplicationLocalization, MatchMode, UnrecognizedLocaleError

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

STRINGS = {
    "en": {"ship_from": "Shipping from: %@", "items": "%d items", "ok": "OK"},
    "German": {"ship_from": "Versand ab: %@", "items": "%d Artikel", "ok": "OK"},
}

with tempfile.TemporaryDirectory() as tmp:
    bundle = Path(tmp) / "UICatalog.app"
    for folder, table in STRINGS.items():
        lproj = bundle / f"{folder}.lproj"
        lproj.mkdir(parents=True)
        (lproj / "Localizable.strings").write_bytes(
            plistlib.dumps(table, fmt=plistlib.FMT_BINARY)
        )

    # Example 1: Loading a bundle
    print("=" * 50)
    print("Example 1: Loading a Bundle")
    print("=" * 50)

    app = ApplicationLocalization.from_app_bundle(bundle, match_mode=MatchMode.ESCAPED)
    print(app)
    print(f"Legacy folder names present: {app.is_legacy_format}")
    # Output: ApplicationLocalization(locales=[de, en])

    # Example 2: Finding keys for on-screen text
    print("\n" + "=" * 50)
    print("Example 2: Finding Keys")
    print("=" * 50)

    for match in app.find_matches("12 items", "en"):
        print(match.key, app.get_dictionary("en").capture_args(match).captured_args)
    # Output: items ('12',)

    # Example 3: Localizing a label
    print("\n" + "=" * 50)
    print("Example 3: Localizing a Label")
    print("=" * 50)

    print(app.localize("Shipping from: Berlin", source="en", target="de"))
    # Output: ['Versand ab: Berlin']

    # Example 4: Unknown languages
    print("\n" + "=" * 50)
    print("Example 4: Unknown Languages")
    print("=" * 50)

    try:
        app.get_dictionary("Klingon")
    except UnrecognizedLocaleError as e:
        print(e.diagnostic.format_error() if e.diagnostic else e)
