"""Batch merge-delete models"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class MergedBranchCandidate:
    """A merged branch considered for deletion."""
    name: str
    merged_into_develop: bool
    merged_into_main: bool
    is_active: bool
    is_protected: bool
    merged_at_develop: Optional[datetime] = None
    merged_at_main: Optional[datetime] = None
    reason: Optional[str] = None  # Why it is excluded from deletion


@dataclass
class BatchDeletePreview:
    """Merged branches partitioned into deletable, protected and active."""
    deletable: List[MergedBranchCandidate] = field(default_factory=list)
    protected: List[MergedBranchCandidate] = field(default_factory=list)
    active: List[MergedBranchCandidate] = field(default_factory=list)

    @property
    def total_merged_branches(self) -> int:
        return len(self.deletable) + len(self.protected) + len(self.active)

    @property
    def skipped(self) -> int:
        return len(self.protected) + len(self.active)


@dataclass
class FailedDeletion:
    """A branch that could not be deleted and the raw git diagnostic."""
    name: str
    error: str


@dataclass
class BatchDeleteResult:
    """Per-branch outcome of a batch delete."""
    succeeded: List[str] = field(default_factory=list)
    failed: List[FailedDeletion] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)
