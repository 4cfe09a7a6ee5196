"""Data models for git-branch-health."""

from .branch import BranchStatus, PRState, PullRequestInfo
from .health import BranchHealth, HealthLevel, ScoredBranch
from .conflict import ConflictPreview
from .batch import BatchDeletePreview, BatchDeleteResult, FailedDeletion, MergedBranchCandidate

__all__ = [
    "BranchStatus",
    "PRState",
    "PullRequestInfo",
    "BranchHealth",
    "HealthLevel",
    "ScoredBranch",
    "ConflictPreview",
    "BatchDeletePreview",
    "BatchDeleteResult",
    "FailedDeletion",
    "MergedBranchCandidate",
]
