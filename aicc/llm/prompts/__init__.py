"""Prompt builders for aicc.

This package provides:
- summary: summarize_diff_for_prompt
- generate: build_generation_messages, MODE_SINGLE, MODE_SPLIT
- refine: build_refine_messages, build_refine_instructions
"""

from aicc.llm.prompts.summary import (
    LOW_PRIVACY_LINE_LIMIT,
    summarize_diff_for_prompt,
)
from aicc.llm.prompts.generate import (
    EMOJI_RULE_GITMOJI,
    EMOJI_RULE_PLAIN,
    MODE_SINGLE,
    MODE_SPLIT,
    build_generation_messages,
    build_system_prompt,
    build_user_prompt,
)
from aicc.llm.prompts.refine import (
    build_refine_instructions,
    build_refine_messages,
)

__all__ = [
    "LOW_PRIVACY_LINE_LIMIT",
    "summarize_diff_for_prompt",
    "EMOJI_RULE_GITMOJI",
    "EMOJI_RULE_PLAIN",
    "MODE_SINGLE",
    "MODE_SPLIT",
    "build_generation_messages",
    "build_system_prompt",
    "build_user_prompt",
    "build_refine_instructions",
    "build_refine_messages",
]
