"""Emoji and symbol helpers for commit titles.

Python's ``re`` has no Unicode property classes, so leading emoji runs are
scanned character by character. A character counts as an emoji/symbol when
its Unicode category is ``So`` or ``Sk``, or when it is one of the joiners
that glue emoji sequences together. ASCII digits, ``#`` and ``*`` never
count, even though they can start keycap sequences.
"""

import unicodedata

ZWJ = "\u200d"
VARIATION_SELECTORS = ("\ufe0e", "\ufe0f")
KEYCAP = "\u20e3"

_JOINERS = frozenset((ZWJ, KEYCAP) + VARIATION_SELECTORS)


def _is_skin_tone(ch: str) -> bool:
    return "\U0001f3fb" <= ch <= "\U0001f3ff"


def is_emoji_char(ch: str) -> bool:
    """Whether a single character is an emoji/symbol or emoji joiner."""
    if ch in _JOINERS:
        return True
    return unicodedata.category(ch) in ("So", "Sk")


def is_punct_char(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def emoji_run_length(text: str) -> int:
    """Length of the run of emoji characters at the start of text."""
    i = 0
    while i < len(text) and is_emoji_char(text[i]):
        i += 1
    return i


def leading_run_length(text: str, include_punct: bool = False, include_space: bool = False) -> int:
    """Length of the leading run of emoji (and optionally punctuation/spaces).

    Whitespace is only consumed after the run has started, so a title that
    begins with whitespace yields 0.

    Args:
        text: Text to scan.
        include_punct: Also consume punctuation characters.
        include_space: Also consume whitespace inside and after the run.

    Returns:
        Number of characters in the run.
    """

    def accepted(ch: str) -> bool:
        return is_emoji_char(ch) or (include_punct and is_punct_char(ch))

    if not text or not accepted(text[0]):
        return 0

    i = 0
    while i < len(text):
        ch = text[i]
        if accepted(ch) or (include_space and ch.isspace()):
            i += 1
        else:
            break
    return i


def first_glyph(text: str) -> str:
    """Return the first user-perceived emoji glyph of text.

    The glyph is the first character plus any variation selectors, keycap,
    skin-tone modifiers and ZWJ-joined characters that follow it.

    Args:
        text: Text starting with an emoji character.

    Returns:
        The glyph, or an empty string for empty input.
    """
    if not text:
        return ""

    i = 1
    while i < len(text):
        ch = text[i]
        if ch in VARIATION_SELECTORS or ch == KEYCAP or _is_skin_tone(ch):
            i += 1
        elif ch == ZWJ and i + 1 < len(text):
            i += 2
        else:
            break
    return text[:i]


def split_leading_glyph(text: str) -> tuple[str, str]:
    """Split a leading emoji glyph from the rest of text.

    Returns:
        (glyph, rest); glyph is empty when text does not start with an emoji.
    """
    if not text or not is_emoji_char(text[0]):
        return "", text
    glyph = first_glyph(text)
    return glyph, text[len(glyph):]
