"""Commit history style profiling.

Summarizes how a repository writes its commit titles so the model can be
nudged toward the same conventions.
"""

import re
from collections import Counter

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from aicc.styles.constants import CONVENTIONAL_TYPES

DEFAULT_AVG_TITLE_LENGTH = 50
TOP_PREFIX_LIMIT = 5
SCOPE_USAGE_THRESHOLD = 0.25

_SCOPE_RE = re.compile(r"^\w+\(.+\):")
_CONVENTIONAL_RE = re.compile(rf"^({'|'.join(CONVENTIONAL_TYPES)})(\(.+\))?: ")
_PREFIX_RE = re.compile(r"^(\w+)(\(.+\))?:")
_GITMOJI_RE = re.compile("[\U0001f300-\U0001faff\u2600-\u27bf]")


class StyleProfile(BaseModel):
    """Read-only summary of a repository's commit title habits."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    tense: str = "imperative"
    avg_title_length: float = DEFAULT_AVG_TITLE_LENGTH
    uses_scopes: bool = False
    gitmoji_ratio: float = 0.0
    top_prefixes: list[str] = Field(default_factory=list)
    conventional_ratio: float = 0.0

    def to_prompt_json(self) -> str:
        """Serialize with camelCase keys for inclusion in a prompt."""
        return self.model_dump_json(by_alias=True)


def _title_of(message: str) -> str:
    return message.split("\n", 1)[0].strip()


def build_style_profile(messages: list[str]) -> StyleProfile:
    """Build a style profile from recent commit messages.

    Only the first line of each message is considered.

    Args:
        messages: Commit messages, newest first.

    Returns:
        A StyleProfile. Defaults apply when there is no history.
    """
    titles = [_title_of(m) for m in messages]
    titles = [t for t in titles if t]
    if not titles:
        return StyleProfile()

    total = len(titles)
    prefix_counts: Counter[str] = Counter()
    scoped = gitmoji = conventional = 0

    for title in titles:
        if _SCOPE_RE.match(title):
            scoped += 1
        if _GITMOJI_RE.search(title):
            gitmoji += 1
        if _CONVENTIONAL_RE.match(title):
            conventional += 1
        match = _PREFIX_RE.match(title)
        if match:
            prefix_counts[match.group(1)] += 1

    # Counter.most_common keeps first-seen order among equal counts
    top_prefixes = [prefix for prefix, _ in prefix_counts.most_common(TOP_PREFIX_LIMIT)]

    return StyleProfile(
        avg_title_length=sum(len(t) for t in titles) / total,
        uses_scopes=scoped / total > SCOPE_USAGE_THRESHOLD,
        gitmoji_ratio=gitmoji / total,
        top_prefixes=top_prefixes,
        conventional_ratio=conventional / total,
    )
