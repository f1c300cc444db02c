"""Commit title style handling for aicc.

This package provides:
- constants: TYPE_DESCRIPTIONS, CONVENTIONAL_TYPES, GITMOJI_MAP, FALLBACK_EMOJI, ...
- emoji: is_emoji_char, first_glyph, leading_run_length, ...
- profile: StyleProfile, build_style_profile
- guardrails: sanitize_title, normalize_conventional_title, check_candidate
- title_format: format_commit_title, batch_format_titles
"""

# Constants
from aicc.styles.constants import (
    CONVENTIONAL_TYPES,
    FALLBACK_EMOJI,
    FALLBACK_TYPE,
    GITMOJI_MAP,
    MAX_TITLE_LENGTH,
    TYPE_DESCRIPTIONS,
)

# Style profiling
from aicc.styles.profile import (
    StyleProfile,
    build_style_profile,
)

# Guardrails
from aicc.styles.guardrails import (
    NOT_CONVENTIONAL_ERROR,
    SECRET_DETECTED_ERROR,
    check_candidate,
    contains_secret,
    is_conventional_title,
    normalize_conventional_title,
    sanitize_title,
)

# Rendering
from aicc.styles.title_format import (
    batch_format_titles,
    emoji_for_type,
    format_commit_title,
)


__all__ = [
    # Constants
    "CONVENTIONAL_TYPES",
    "FALLBACK_EMOJI",
    "FALLBACK_TYPE",
    "GITMOJI_MAP",
    "MAX_TITLE_LENGTH",
    "TYPE_DESCRIPTIONS",
    # Profiling
    "StyleProfile",
    "build_style_profile",
    # Guardrails
    "NOT_CONVENTIONAL_ERROR",
    "SECRET_DETECTED_ERROR",
    "check_candidate",
    "contains_secret",
    "is_conventional_title",
    "normalize_conventional_title",
    "sanitize_title",
    # Rendering
    "batch_format_titles",
    "emoji_for_type",
    "format_commit_title",
]
