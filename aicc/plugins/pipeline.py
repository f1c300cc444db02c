"""Running plugin hooks over commit candidates."""

from aicc.compose.models import CommitCandidate
from aicc.plugins.base import Plugin, PluginContext, ValidationResult


def apply_transforms(
    plugins: list[Plugin], candidates: list[CommitCandidate], ctx: PluginContext
) -> list[CommitCandidate]:
    """Thread candidates through every plugin's transform, in order."""
    for plugin in plugins:
        candidates = list(plugin.transform_candidates(candidates, ctx))
    return candidates


def _as_errors(result: ValidationResult) -> list[str]:
    if result is None:
        return []
    if isinstance(result, str):
        return [result] if result else []
    return [str(item) for item in result if item]


def run_validations(plugins: list[Plugin], candidate: CommitCandidate, ctx: PluginContext) -> list[str]:
    """Collect validation errors from every plugin.

    All plugins run; errors are concatenated in plugin order.
    """
    errors: list[str] = []
    for plugin in plugins:
        errors.extend(_as_errors(plugin.validate_candidate(candidate, ctx)))
    return errors
