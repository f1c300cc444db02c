"""Commit plans, clustering and split execution for aicc.

This package provides:
- models: CommitCandidate, CommitPlan, PlanMeta, Cluster
- cluster: cluster_hunks
- executor: resolve_file_assignments, execute_split, SplitResult
"""

from aicc.compose.models import (
    Cluster,
    CommitCandidate,
    CommitPlan,
    PlanMeta,
)
from aicc.compose.cluster import (
    MAX_HUNKS_PER_DIRECTORY,
    cluster_hunks,
)
from aicc.compose.executor import (
    SplitResult,
    assignments_are_valid,
    execute_split,
    resolve_file_assignments,
    round_robin_assignments,
)


__all__ = [
    # Models
    "Cluster",
    "CommitCandidate",
    "CommitPlan",
    "PlanMeta",
    # Clustering
    "MAX_HUNKS_PER_DIRECTORY",
    "cluster_hunks",
    # Execution
    "SplitResult",
    "assignments_are_valid",
    "execute_split",
    "resolve_file_assignments",
    "round_robin_assignments",
]
