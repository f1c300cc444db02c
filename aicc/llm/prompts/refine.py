"""Refine prompt for adjusting a single commit candidate."""

import json
from typing import Optional

from aicc.compose.models import CommitPlan
from aicc.config import AppConfig
from aicc.llm.base import ChatMessage
from aicc.llm.prompts.generate import OUTPUT_SCHEMA, title_rules

SHORTER_INSTRUCTION = "Make the title shorter but keep meaning."
LONGER_INSTRUCTION = "Add more specificity to the title."
EMOJI_INSTRUCTION = "Add a relevant emoji prefix."


def build_refine_instructions(
    shorter: bool = False,
    longer: bool = False,
    scope: Optional[str] = None,
    emoji: bool = False,
    extra: Optional[list[str]] = None,
) -> list[str]:
    """Translate refine options into model instructions."""
    instructions = []
    if shorter:
        instructions.append(SHORTER_INSTRUCTION)
    if longer:
        instructions.append(LONGER_INSTRUCTION)
    if scope:
        instructions.append(f"Add or adjust scope to: {scope}")
    if emoji:
        instructions.append(EMOJI_INSTRUCTION)
    instructions.extend(i.strip() for i in (extra or []) if i.strip())
    return instructions


def build_refine_messages(
    plan: CommitPlan,
    index: int,
    instructions: list[str],
    config: AppConfig,
    allow_gitmoji: Optional[bool] = None,
) -> list[ChatMessage]:
    """Assemble the messages for refining one commit of a plan.

    Args:
        plan: The plan containing the commit.
        index: 0-based index of the commit to refine.
        instructions: What to change.
        config: Resolved configuration.
        allow_gitmoji: Overrides the configured gitmoji setting.

    Returns:
        [system message, user message]

    Raises:
        IndexError: If index is out of range.
    """
    if not 0 <= index < len(plan.commits):
        raise IndexError(f"Commit index {index} out of range (plan has {len(plan.commits)} commits)")

    if allow_gitmoji is None:
        allow_gitmoji = config.allow_gitmoji

    system = "\n".join(
        [
            "Purpose: Refine one existing git commit message candidate according to the instructions.",
            "Locale: en",
            f"Output JSON Schema: {OUTPUT_SCHEMA}",
            *title_rules(allow_gitmoji),
            "Keep the original meaning; only change what the instructions ask for.",
            "Return exactly one commit in the commits array. Return ONLY the JSON object.",
        ]
    )

    commit_json = json.dumps(plan.commits[index].model_dump(by_alias=True, exclude_defaults=True))
    listed = "\n".join(f"- {i}" for i in instructions) if instructions else "None"
    user = f"Current commit object:\n{commit_json}\nInstructions:\n{listed}\nRefine now."

    return [
        ChatMessage(role="system", content=system),
        ChatMessage(role="user", content=user),
    ]
