"""Rebase conflict forecast model"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ConflictPreview:
    """Outcome of a simulated three-way merge."""
    has_conflicts: bool
    conflict_count: int
    conflicted_files: List[str] = field(default_factory=list)
    summary: str = ""
    error: Optional[str] = None  # Set when the forecast could not be computed
