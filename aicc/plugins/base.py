"""Base classes for commit plugins."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

from aicc.compose.models import CommitCandidate

# A validation hook may report nothing, one problem, or several
ValidationResult = Union[None, str, list[str]]


@dataclass(frozen=True)
class PluginContext:
    """Read-only context handed to every plugin hook."""

    cwd: Path
    env: Mapping[str, str] = field(default_factory=dict)


class Plugin:
    """Base class for plugins.

    Both hooks are optional; the defaults pass candidates through
    unchanged and report no problems.
    """

    name: str = "plugin"

    def transform_candidates(
        self, candidates: list[CommitCandidate], ctx: PluginContext
    ) -> list[CommitCandidate]:
        """Rewrite the candidate list.

        Args:
            candidates: Candidates produced so far.
            ctx: Plugin context.

        Returns:
            The candidates to hand to the next plugin.
        """
        return candidates

    def validate_candidate(self, candidate: CommitCandidate, ctx: PluginContext) -> ValidationResult:
        """Check a single candidate.

        Returns:
            None when fine, otherwise one or more error strings.
        """
        return None


class FunctionPlugin(Plugin):
    """Adapts module-level hook functions to the Plugin interface."""

    def __init__(
        self,
        name: str,
        transform: Optional[Callable] = None,
        validate: Optional[Callable] = None,
    ):
        self.name = name
        self._transform = transform
        self._validate = validate

    def transform_candidates(self, candidates, ctx):
        if self._transform is None:
            return candidates
        return self._transform(candidates, ctx)

    def validate_candidate(self, candidate, ctx):
        if self._validate is None:
            return None
        return self._validate(candidate, ctx)
