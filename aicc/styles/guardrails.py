"""Title sanitizing, normalization and guardrail checks.

Model output is cleaned up in two passes before rendering:

1. sanitize_title drops or collapses leading emoji clutter
2. normalize_conventional_title coerces the text into ``type(scope): subject``

check_candidate reports problems that are shown to the user as warnings.
"""

import re

from aicc.styles.constants import CONVENTIONAL_TYPES, FALLBACK_TYPE, SECRET_PATTERNS
from aicc.styles.emoji import emoji_run_length, first_glyph, is_emoji_char, leading_run_length

NOT_CONVENTIONAL_ERROR = "Not a valid conventional commit title."
SECRET_DETECTED_ERROR = "Potential secret detected."

_WORD = r"[A-Za-z0-9_]"
_TYPES = "|".join(CONVENTIONAL_TYPES)

# type(scope): subject
TYPE_SUBJECT_RE = re.compile(rf"^({_WORD}+)(\(.+\))?:\s+(.*)$")
# Titles of this shape are left alone when they fail the grammar above
_LOOSE_SCOPED_RE = re.compile(rf"^{_WORD}+\(.+\)?: ")

_KNOWN_TYPE_PREFIX_RE = re.compile(rf"^({_TYPES})(\(.+\))?:\s")
_EMOJI_THEN_TYPE_RE = re.compile(rf"^\s+({_TYPES})(\(.+\))?:\s")
_EMOJI_COLON_RE = re.compile(r"^:(\s|\s*$)")

_SECRET_RES = tuple(
    re.compile(pattern, re.IGNORECASE if ignore_case else 0)
    for pattern, ignore_case in SECRET_PATTERNS
)


def sanitize_title(title: str, allow_emoji: bool) -> str:
    """Clean up the leading emoji run of a title.

    Args:
        title: Raw title text.
        allow_emoji: Keep one leading glyph when True, otherwise strip the
            whole leading run of emoji, symbols and punctuation.

    Returns:
        The sanitized title.
    """
    text = title.strip()

    if allow_emoji:
        run = leading_run_length(text, include_space=True)
        if run:
            text = f"{first_glyph(text)} {text[run:].lstrip()}"
    else:
        run = leading_run_length(text, include_punct=True, include_space=True)
        text = text[run:].lstrip()

    return text


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def _strip_trailing_period(text: str) -> str:
    return text[:-1] if text.endswith(".") else text


def normalize_conventional_title(title: str) -> str:
    """Coerce a title into Conventional Commit shape.

    The first glyph of a leading emoji run is preserved and re-attached.
    A ``type(scope): subject`` title gets a lowercase type, a subject with
    a lowercase first letter and no trailing period. Anything else falls
    back to the ``chore`` type.

    Args:
        title: Title text, usually already sanitized.

    Returns:
        The normalized title.
    """
    text = title.strip()
    leading = first_glyph(text) if text and is_emoji_char(text[0]) else ""

    run = leading_run_length(text, include_punct=True, include_space=True)
    text = text[run:].strip()

    match = TYPE_SUBJECT_RE.match(text)
    if match:
        commit_type = match.group(1).lower()
        scope = match.group(2) or ""
        subject = _lower_first(_strip_trailing_period(match.group(3)).strip())
        if subject:
            text = f"{commit_type}{scope}: {subject}"
        else:
            text = f"{FALLBACK_TYPE}: {commit_type}{scope}"
    elif not _LOOSE_SCOPED_RE.match(text):
        text = f"{FALLBACK_TYPE}: {_lower_first(_strip_trailing_period(text))}"

    if leading:
        text = f"{leading} {text}"
    return text


def is_conventional_title(title: str) -> bool:
    """Whether a title has one of the accepted Conventional Commit forms.

    Accepted: ``<emoji> <type>[(scope)]: ...``, ``<emoji>: ...``,
    ``<emoji>:`` on its own, and ``<type>[(scope)]: ...``.
    """
    run = emoji_run_length(title)
    if run:
        rest = title[run:]
        if _EMOJI_THEN_TYPE_RE.match(rest) or _EMOJI_COLON_RE.match(rest):
            return True
    return bool(_KNOWN_TYPE_PREFIX_RE.match(title))


def contains_secret(text: str) -> bool:
    return any(pattern.search(text) for pattern in _SECRET_RES)


def check_candidate(candidate) -> list[str]:
    """Run the built-in guardrails on a candidate.

    Title length is not checked here.

    Args:
        candidate: A CommitCandidate.

    Returns:
        Error messages; empty when the candidate passes.
    """
    errors = []
    if not is_conventional_title(candidate.title):
        errors.append(NOT_CONVENTIONAL_ERROR)
    if candidate.body and contains_secret(candidate.body):
        errors.append(SECRET_DETECTED_ERROR)
    return errors
