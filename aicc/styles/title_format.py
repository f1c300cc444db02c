"""Final commit title rendering for the three style modes.

- standard: ``type(scope): subject``
- gitmoji: ``<emoji> type(scope): subject``
- gitmoji-pure: ``<emoji>: subject``
"""

import re
from typing import Iterable

from aicc.config import StyleMode
from aicc.styles.constants import FALLBACK_EMOJI, FALLBACK_TYPE, GITMOJI_MAP
from aicc.styles.emoji import emoji_run_length, split_leading_glyph
from aicc.styles.guardrails import TYPE_SUBJECT_RE, normalize_conventional_title, sanitize_title

_WORD = r"[A-Za-z0-9_]"

# What follows the glyph in "<emoji> type(scope): subject"
_AFTER_GLYPH_RE = re.compile(rf"^\s+({_WORD}+)(\(.+\))?:\s+(.*)$")
# What follows an emoji run in "<emoji> word...:"
_LOOSE_AFTER_RUN_RE = re.compile(rf"^\s+{_WORD}+.*:")


def emoji_for_type(commit_type: str) -> str:
    return GITMOJI_MAP.get(commit_type, FALLBACK_EMOJI)


def _render_pure(title: str) -> str:
    glyph, rest = split_leading_glyph(title)
    if glyph:
        match = _AFTER_GLYPH_RE.match(rest)
        if match:
            return f"{glyph}: {match.group(3)}"

    match = TYPE_SUBJECT_RE.match(title)
    if match:
        return f"{emoji_for_type(match.group(1))}: {match.group(3)}"

    run = emoji_run_length(title)
    if run and title[run:].startswith(":"):
        return title
    return f"{FALLBACK_EMOJI}: {title}"


def _render_gitmoji(title: str) -> str:
    glyph, rest = split_leading_glyph(title)
    if glyph and _AFTER_GLYPH_RE.match(rest):
        return title

    match = TYPE_SUBJECT_RE.match(title)
    if match:
        commit_type, scope, subject = match.group(1), match.group(2) or "", match.group(3)
        return f"{emoji_for_type(commit_type)} {commit_type}{scope}: {subject}"

    run = emoji_run_length(title)
    if run and _LOOSE_AFTER_RUN_RE.match(title[run:]):
        return title
    return f"{FALLBACK_EMOJI} {FALLBACK_TYPE}: {title}"


def format_commit_title(raw: str, allow_gitmoji: bool, mode: StyleMode = StyleMode.STANDARD) -> str:
    """Turn a raw model title into the final commit title.

    Args:
        raw: Title as produced by the model or a plugin.
        allow_gitmoji: Whether a leading gitmoji may survive sanitizing.
        mode: Rendering mode. Gitmoji modes only apply when
            allow_gitmoji is True.

    Returns:
        The rendered title.
    """
    mode = StyleMode(mode)
    title = normalize_conventional_title(sanitize_title(raw, allow_gitmoji))

    if not allow_gitmoji or mode == StyleMode.STANDARD:
        return title
    if mode == StyleMode.GITMOJI_PURE:
        return _render_pure(title)
    return _render_gitmoji(title)


def batch_format_titles(candidates: Iterable, allow_gitmoji: bool, mode: StyleMode = StyleMode.STANDARD) -> list:
    """Format the titles of several candidates.

    Args:
        candidates: CommitCandidate objects.
        allow_gitmoji: See format_commit_title.
        mode: See format_commit_title.

    Returns:
        New CommitCandidate objects with formatted titles.
    """
    return [
        c.model_copy(update={"title": format_commit_title(c.title, allow_gitmoji, mode)})
        for c in candidates
    ]
