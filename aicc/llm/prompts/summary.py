"""Privacy-tiered diff summaries for prompts.

- high: one line per file with totals only
- medium: hunk ids, function context and line counts, no code
- low: hunk headers plus the first LOW_PRIVACY_LINE_LIMIT raw lines
"""

from aicc.config import PrivacyLevel
from aicc.diff.models import FileDiff, Hunk

LOW_PRIVACY_LINE_LIMIT = 40
TRUNCATION_MARKER = "[truncated]"


def _summarize_high(file_diff: FileDiff) -> str:
    return f"file: {file_diff.file_path} (+{file_diff.additions} -{file_diff.deletions}) hunks:{len(file_diff.hunks)}"


def _summarize_medium_hunk(hunk: Hunk) -> str:
    return f"  hunk {hunk.hash} context:{hunk.function_context or ''} +{hunk.added} -{hunk.removed}"


def _summarize_low_hunk(hunk: Hunk) -> str:
    text = hunk.header + "\n" + "\n".join(hunk.lines[:LOW_PRIVACY_LINE_LIMIT])
    if len(hunk.lines) > LOW_PRIVACY_LINE_LIMIT:
        text += "\n" + TRUNCATION_MARKER
    return text


def summarize_diff_for_prompt(files: list[FileDiff], privacy: PrivacyLevel) -> str:
    """Render parsed diffs as prompt text at the given privacy level.

    Args:
        files: Parsed file diffs.
        privacy: How much content may leave the machine.

    Returns:
        The diff summary.
    """
    privacy = PrivacyLevel(privacy)

    if privacy == PrivacyLevel.HIGH:
        return "\n".join(_summarize_high(f) for f in files)

    render_hunk = _summarize_medium_hunk if privacy == PrivacyLevel.MEDIUM else _summarize_low_hunk
    blocks = []
    for file_diff in files:
        hunks = "\n".join(render_hunk(h) for h in file_diff.hunks)
        blocks.append(f"file: {file_diff.file_path}\n{hunks}")
    return "\n".join(blocks)
