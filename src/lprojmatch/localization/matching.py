"""Template matching and reverse formatting.

A template such as ``"Shipping from: %@"`` is what the app passes to
``NSLocalizedString``; the device displays it after substituting runtime
values. To find which key produced an on-screen string, each placeholder
becomes a wildcard group and the candidate must match the whole pattern.

Both sides are Unicode-normalized (NFKC) before comparison.

Pattern modes:
    RAW: literal text is inserted unescaped, so regex metacharacters in a
        template act as operators. Templates that fail to compile are
        reported through ``re.error`` and skipped by callers.
    ESCAPED: literal text is escaped; only placeholders are wildcards.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import re
import unicodedata
from collections.abc import Sequence

from lprojmatch.constants import (
    ESCAPED_PERCENT,
    NORMALIZATION_FORM,
    PATTERN_CACHE_SIZE,
    PLACEHOLDER_PATTERN,
)
from lprojmatch.diagnostics import ArgumentCountMismatchError, ErrorTemplate
from lprojmatch.enums import MatchMode

__all__ = [
    "build_match_pattern",
    "captured_args",
    "compile_match_pattern",
    "count_placeholders",
    "format_template",
    "match_template",
    "normalize_text",
]

_PERCENT_TOKEN_RE = re.compile(PLACEHOLDER_PATTERN)

# Named so that parentheses in RAW templates cannot shift argument positions.
_GROUP_PREFIX = "lprojarg"


def normalize_text(text: str) -> str:
    """Apply compatibility composition (NFKC). Idempotent."""
    return unicodedata.normalize(NORMALIZATION_FORM, text)


def _split_template(template: str) -> list[str]:
    """Literal segments around the placeholders of a template.

    ``%%`` escapes stay inside their literal segment, written as-is.
    """
    res: list[str] = []
    start = 0
    for token in _PERCENT_TOKEN_RE.finditer(template):
        if token.group() == ESCAPED_PERCENT:
            continue
        res.append(template[start : token.start()])
        start = token.end()
    res.append(template[start:])
    return res


def count_placeholders(template: str) -> int:
    """Number of %@ / %d markers in a template, ignoring %% escapes."""
    return len(_split_template(template)) - 1


def build_match_pattern(template: str, mode: MatchMode = MatchMode.RAW) -> str:
    """Derive a regular expression from a template.

    Args:
        template: Localized value, already normalized
        mode: Whether literal segments are escaped

    Returns:
        Pattern source with one wildcard group per placeholder

    Example:
        >>> build_match_pattern("Shipping from: %@")
        'Shipping from: (?P<lprojarg0>.*)'
    """
    literals = _split_template(template)
    if mode is MatchMode.ESCAPED:
        literals = [re.escape(literal) for literal in literals]

    parts = [literals[0]]
    for index, literal in enumerate(literals[1:]):
        parts.append(f"(?P<{_GROUP_PREFIX}{index}>.*)")
        parts.append(literal)
    return "".join(parts)


@functools.lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_match_pattern(template: str, mode: MatchMode = MatchMode.RAW) -> re.Pattern[str]:
    """Compile the match pattern of a template.

    Wildcards cross line breaks, so multi-line values still match.

    Raises:
        re.error: If the template is not a valid pattern (RAW mode only)
    """
    return re.compile(build_match_pattern(template, mode), re.DOTALL)


def match_template(
    candidate: str, template: str, mode: MatchMode = MatchMode.RAW
) -> re.Match[str] | None:
    """Whole-string match of a candidate against a template.

    Args:
        candidate: Text observed on screen
        template: Localized value from the string table
        mode: Pattern mode

    Returns:
        The match, or None when the candidate could not come from template

    Raises:
        re.error: If the template is not a valid pattern
    """
    pattern = compile_match_pattern(normalize_text(template), mode)
    return pattern.fullmatch(normalize_text(candidate))


def captured_args(match: re.Match[str]) -> tuple[str, ...]:
    """Values captured by the placeholder groups, in template order."""
    names = sorted(
        (name for name in match.re.groupindex if name.startswith(_GROUP_PREFIX)),
        key=lambda name: int(name.removeprefix(_GROUP_PREFIX)),
    )
    return tuple(match.group(name) or "" for name in names)


def format_template(template: str, args: Sequence[object], *, key: str = "") -> str:
    """Substitute arguments into a template's placeholders, in order.

    Every placeholder is treated as one generic substitution marker
    regardless of its type letter. Other ``%`` characters, ``%%`` escapes
    included, are kept as written.

    Args:
        template: Localized value
        args: One value per placeholder
        key: Key of the template, used in error reporting

    Returns:
        The formatted string

    Raises:
        ArgumentCountMismatchError: If len(args) differs from the
            number of placeholders

    Example:
        >>> format_template("Versand ab: %@", ["Berlin"])
        'Versand ab: Berlin'
    """
    expected = count_placeholders(template)
    if expected != len(args):
        raise ArgumentCountMismatchError(
            ErrorTemplate.argument_count_mismatch(key, expected, len(args)),
            key=key,
            expected=expected,
            received=len(args),
        )

    literals = _split_template(template)
    parts = [literals[0]]
    for arg, literal in zip(args, literals[1:], strict=True):
        parts.append(str(arg))
        parts.append(literal)
    return "".join(parts)
