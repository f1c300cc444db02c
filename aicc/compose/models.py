"""Data models for commit candidates, plans and hunk clusters."""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommitCandidate(BaseModel):
    """One proposed commit as returned by the model.

    Attributes:
        title: Commit title (5-150 characters before formatting)
        body: Commit body, possibly empty
        score: Model confidence from 0 to 100
        reasons: Short justifications for the proposal
        files: Paths this commit should contain (split mode)
        cluster_ids: Ids of the clusters the commit was built from
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=5, max_length=150, strict=True)
    body: str = ""
    score: float = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    cluster_ids: list[str] = Field(default_factory=list, alias="clusterIds")

    @field_validator("body", mode="before")
    @classmethod
    def _null_body_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("score", mode="before")
    @classmethod
    def _score_must_be_numeric(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("score must be a number")
        return v


class PlanMeta(BaseModel):
    """Plan-level metadata."""

    model_config = ConfigDict(populate_by_name=True)

    split_recommended: Optional[bool] = Field(default=None, alias="splitRecommended")


class CommitPlan(BaseModel):
    """The model's full answer: one or more ordered candidates."""

    commits: list[CommitCandidate] = Field(min_length=1)
    meta: Optional[PlanMeta] = None

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


@dataclass
class Cluster:
    """A heuristic group of hunks proposed as one commit."""

    id: str
    files: list[str]
    hunk_hashes: list[str] = field(default_factory=list)
    rationale: str = ""
