"""End-to-end commit generation steps shared by the CLI commands.

staged diff -> parse -> style profile -> prompt -> model -> extract
-> plugin transforms -> title formatting -> validations
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from aicc.compose.models import Cluster, CommitCandidate, CommitPlan
from aicc.config import AppConfig
from aicc.diff import FileDiff, parse_unified_diff
from aicc.git import (
    NoStagedChangesError,
    get_recent_commit_messages,
    get_staged_diff,
    get_staged_files,
)
from aicc.llm import BaseLLMProvider, extract_commit_plan
from aicc.llm.prompts import MODE_SINGLE, build_generation_messages, build_refine_messages
from aicc.log import get_logger
from aicc.plugins import Plugin, PluginContext, apply_transforms, run_validations
from aicc.styles import batch_format_titles, build_style_profile, check_candidate, format_commit_title

logger = get_logger(__name__)

NO_STAGED_CHANGES_MESSAGE = "No staged changes."
NO_DIFF_CONTENT_MESSAGE = "No diff content detected after staging. Aborting."


@dataclass
class StagedChanges:
    """What is currently staged, raw and parsed."""

    staged_files: list[str]
    files: list[FileDiff]


def collect_staged_changes(repo_root: Optional[Path] = None) -> StagedChanges:
    """Read and parse the staged diff.

    Raises:
        NoStagedChangesError: If nothing is staged, or the staged diff has
            no parseable file sections.
        GitError: If git fails.
    """
    staged_files = get_staged_files(cwd=repo_root)
    if not staged_files:
        raise NoStagedChangesError(NO_STAGED_CHANGES_MESSAGE)

    files = parse_unified_diff(get_staged_diff(cwd=repo_root))
    if not files:
        raise NoStagedChangesError(NO_DIFF_CONTENT_MESSAGE)

    logger.debug("Parsed %d files, %d hunks", len(files), sum(len(f.hunks) for f in files))
    return StagedChanges(staged_files=staged_files, files=files)


def make_plugin_context(repo_root: Path) -> PluginContext:
    return PluginContext(cwd=repo_root, env=dict(os.environ))


def request_plan(
    files: list[FileDiff],
    config: AppConfig,
    provider: BaseLLMProvider,
    repo_root: Optional[Path] = None,
    mode: str = MODE_SINGLE,
    desired_commits: Optional[int] = None,
    clusters: Optional[list[Cluster]] = None,
) -> CommitPlan:
    """Ask the model for a commit plan.

    Args:
        files: Parsed staged diff.
        config: Resolved configuration.
        provider: Model provider to call.
        repo_root: Repository whose history is profiled.
        mode: MODE_SINGLE or MODE_SPLIT.
        desired_commits: Requested commit count in split mode.
        clusters: Heuristic clusters to suggest in split mode.

    Returns:
        The validated plan, titles still raw.

    Raises:
        LLMError: If the provider call fails or the response cannot be parsed.
    """
    history = get_recent_commit_messages(config.style_samples, cwd=repo_root)
    style = build_style_profile(history)
    logger.debug("Style profile: %s", style.to_prompt_json())

    messages = build_generation_messages(files, style, config, mode, desired_commits, clusters)
    raw = provider.chat(messages, config.max_tokens)
    logger.debug("Raw model response: %s", raw)
    return extract_commit_plan(raw)


def finalize_candidates(
    candidates: list[CommitCandidate],
    plugins: list[Plugin],
    ctx: PluginContext,
    config: AppConfig,
) -> list[CommitCandidate]:
    """Run plugin transforms, then render final titles."""
    transformed = apply_transforms(plugins, candidates, ctx)
    return batch_format_titles(transformed, config.allow_gitmoji, config.style)


def review_candidate(candidate: CommitCandidate, plugins: list[Plugin], ctx: PluginContext) -> list[str]:
    """Plugin validation errors followed by built-in guardrail errors."""
    return run_validations(plugins, candidate, ctx) + check_candidate(candidate)


def refine_candidate(
    plan: CommitPlan,
    index: int,
    instructions: list[str],
    config: AppConfig,
    provider: BaseLLMProvider,
    allow_gitmoji: Optional[bool] = None,
) -> CommitCandidate:
    """Ask the model to adjust one commit of a plan.

    Args:
        plan: Plan containing the commit.
        index: 0-based commit index.
        instructions: What to change.
        config: Resolved configuration.
        provider: Model provider to call.
        allow_gitmoji: Overrides the configured gitmoji setting.

    Returns:
        The refined candidate with a formatted title. Files from the
        original commit are kept when the model drops them.

    Raises:
        IndexError: If index is out of range.
        LLMError: If the provider call fails or the response cannot be parsed.
    """
    if allow_gitmoji is None:
        allow_gitmoji = config.allow_gitmoji

    messages = build_refine_messages(plan, index, instructions, config, allow_gitmoji)
    raw = provider.chat(messages, config.max_tokens)
    refined = extract_commit_plan(raw).commits[0]

    original = plan.commits[index]
    update = {"title": format_commit_title(refined.title, allow_gitmoji, config.style)}
    if not refined.files and original.files:
        update["files"] = original.files
    return refined.model_copy(update=update)
