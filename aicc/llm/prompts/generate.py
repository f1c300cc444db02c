"""Generation prompt for single and split commit modes."""

import json
from typing import Optional

from aicc.compose.models import Cluster
from aicc.config import AppConfig
from aicc.diff.models import FileDiff
from aicc.llm.base import ChatMessage
from aicc.llm.prompts.summary import summarize_diff_for_prompt
from aicc.styles.constants import FALLBACK_TYPE, MAX_TITLE_LENGTH, TYPE_DESCRIPTIONS
from aicc.styles.profile import StyleProfile

MODE_SINGLE = "single"
MODE_SPLIT = "split"

SPLIT_DEFAULT_COMMIT_RANGE = "2-6"

OUTPUT_SCHEMA = (
    '{ "commits": [ { "title": string, "body": string, "score": 0-100, '
    '"reasons": string[], "files"?: string[] } ], "meta": { "splitRecommended": boolean } }'
)

EMOJI_RULE_GITMOJI = (
    "OPTIONAL single leading gitmoji BEFORE the type only if confidently adds clarity; "
    "do not invent or stack; omit if unsure."
)
EMOJI_RULE_PLAIN = "Disallow all emojis and gitmoji codes; output must start directly with the type."


def emoji_rule(allow_gitmoji: bool) -> str:
    return EMOJI_RULE_GITMOJI if allow_gitmoji else EMOJI_RULE_PLAIN


def title_rules(allow_gitmoji: bool) -> list[str]:
    """Title rules shared by the generation and refine prompts."""
    title_format = "<type>(<optional-scope>): <subject>"
    if allow_gitmoji:
        title_format = "[optional gitmoji] " + title_format

    return [
        f"Title Format: {title_format}",
        f"Max Title Length: {MAX_TITLE_LENGTH} characters (hard limit).",
        f"TypeMap: {json.dumps(TYPE_DESCRIPTIONS)}",
        "Scope Rules: optional; if present, lowercase kebab-case; omit when unclear.",
        "Subject Rules: imperative mood, present tense, no trailing period.",
        f"Emoji Rule: {emoji_rule(allow_gitmoji)}",
        "Forbidden: breaking change notation (no '!' after the type, no BREAKING CHANGE footer).",
        f"Fallback Type: {FALLBACK_TYPE} when no other type clearly fits.",
    ]


def build_system_prompt(style: StyleProfile, config: AppConfig, mode: str) -> str:
    """Build the system message for commit generation."""
    preferred = ", ".join(style.top_prefixes) if style.top_prefixes else "none"

    lines = [
        "Purpose: Generate high-quality Conventional Commit message candidates for the staged git diff.",
        "Locale: en",
        f"Output JSON Schema: {OUTPUT_SCHEMA}",
        *title_rules(config.allow_gitmoji),
        f"Consistency: prefer the repository's existing top prefixes when they fit ({preferred}).",
        "Score: 0-100 confidence that the title is accurate and complete for its changes.",
        "Reasons: 1-3 short strings explaining the choice of type, scope and subject.",
    ]
    if mode == MODE_SPLIT:
        lines += [
            "Files: every commit MUST include a \"files\" array of 1-6 staged paths; minimize overlap between commits.",
            "Set meta.splitRecommended to true when the diff contains multiple logical changes.",
        ]
    else:
        lines.append("Set meta.splitRecommended to true only if the diff clearly mixes unrelated changes.")
    lines.append("Return ONLY the JSON object. No markdown fences. No commentary.")

    return "\n".join(lines)


def _clusters_json(clusters: list[Cluster]) -> str:
    return json.dumps(
        [
            {
                "id": c.id,
                "files": c.files,
                "hunkHashes": c.hunk_hashes,
                "rationale": c.rationale,
            }
            for c in clusters
        ]
    )


def build_user_prompt(
    files: list[FileDiff],
    style: StyleProfile,
    config: AppConfig,
    mode: str,
    desired_commits: Optional[int] = None,
    clusters: Optional[list[Cluster]] = None,
) -> str:
    """Build the user message for commit generation."""
    if mode == MODE_SPLIT:
        requested = str(desired_commits) if desired_commits else SPLIT_DEFAULT_COMMIT_RANGE
    else:
        requested = "1"

    parts = [
        f"Mode: {mode}",
        f"RequestedCommitCount: {requested}",
        f"StyleFingerprint: {style.to_prompt_json()}",
    ]
    if mode == MODE_SPLIT and clusters:
        parts.append(f"SuggestedClusters (heuristic, not binding): {_clusters_json(clusters)}")
    parts.append(f"Diff:\n{summarize_diff_for_prompt(files, config.privacy)}")
    parts.append("Generate commit candidates now.")

    return "\n".join(parts)


def build_generation_messages(
    files: list[FileDiff],
    style: StyleProfile,
    config: AppConfig,
    mode: str = MODE_SINGLE,
    desired_commits: Optional[int] = None,
    clusters: Optional[list[Cluster]] = None,
) -> list[ChatMessage]:
    """Assemble the messages for a generation call.

    Args:
        files: Parsed staged diff.
        style: Repository style profile.
        config: Resolved configuration (privacy, style mode).
        mode: MODE_SINGLE or MODE_SPLIT.
        desired_commits: Requested number of commits in split mode.
        clusters: Heuristic clusters to suggest in split mode.

    Returns:
        [system message, user message]
    """
    return [
        ChatMessage(role="system", content=build_system_prompt(style, config, mode)),
        ChatMessage(
            role="user",
            content=build_user_prompt(files, style, config, mode, desired_commits, clusters),
        ),
    ]
