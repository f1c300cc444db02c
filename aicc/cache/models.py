"""Pydantic models for persisted session data."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from aicc.compose.models import CommitCandidate, CommitPlan


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionSnapshot(BaseModel):
    """The most recent generate/split run.

    Attributes:
        plan: The full plan returned by the model (formatted titles)
        chosen: The candidate(s) that were committed
        mode: "single" or "split"
        model: Model identifier used for the run
        generated_at: When the plan was produced
    """

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    plan: CommitPlan
    chosen: list[CommitCandidate] = Field(default_factory=list)
    mode: Literal["single", "split"] = "single"
    model: str = ""
    generated_at: datetime = Field(default_factory=_utc_now)
