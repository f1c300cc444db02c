"""Example plugin: reward scoped titles, flag work-in-progress commits."""

import re

from aicc.plugins.base import Plugin
from aicc.plugins.registry import PluginRegistry

SCOPE_BONUS = 5
WIP_ERROR = "Title contains WIP; remove before committing."

_SCOPED_TITLE_RE = re.compile(r"^\w+\(.+\): ")
_WIP_RE = re.compile(r"\bWIP\b", re.IGNORECASE)


@PluginRegistry.register("wip-guard")
class WipGuardPlugin(Plugin):
    """Bumps the score of scoped titles and rejects WIP titles."""

    name = "wip-guard"

    def transform_candidates(self, candidates, ctx):
        result = []
        for candidate in candidates:
            if _SCOPED_TITLE_RE.match(candidate.title):
                candidate = candidate.model_copy(
                    update={"score": min(100, candidate.score + SCOPE_BONUS)}
                )
            result.append(candidate)
        return result

    def validate_candidate(self, candidate, ctx):
        if _WIP_RE.search(candidate.title):
            return WIP_ERROR
        return None
