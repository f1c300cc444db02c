"""Unified diff parsing for aicc.

This package provides:
- models: Hunk, FileDiff
- parser: parse_unified_diff, compute_hunk_hash
"""

from aicc.diff.models import FileDiff, Hunk
from aicc.diff.parser import compute_hunk_hash, parse_unified_diff

__all__ = [
    "FileDiff",
    "Hunk",
    "compute_hunk_hash",
    "parse_unified_diff",
]
