"""Pytest configuration for the lprojmatch test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Bundle fixtures:
Application bundles are built under tmp_path. Resources are written as
binary property lists with plistlib, the format Xcode ships, and read
back with PlistlibConverter so no test depends on plutil.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from lprojmatch.constants import RESOURCE_FILENAME
from lprojmatch.localization.loading import PlistlibConverter
from tests.helpers.bundles import BundleFactory, write_binary_strings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# BUNDLE FIXTURES
# =============================================================================


@pytest.fixture
def make_app(tmp_path: Path) -> BundleFactory:
    """Build an .app bundle from ``{folder_name: content}``.

    A content of None creates the .lproj folder without a resource file.
    """

    def factory(languages: Mapping[str, Mapping[str, str] | None]) -> Path:
        app = tmp_path / "UICatalog.app"
        app.mkdir(exist_ok=True)
        for name, content in languages.items():
            folder = app / f"{name}.lproj"
            folder.mkdir(exist_ok=True)
            if content is not None:
                write_binary_strings(folder / RESOURCE_FILENAME, content)
        return app

    return factory


@pytest.fixture
def converter() -> PlistlibConverter:
    return PlistlibConverter()
