"""Formatting utilities for git-branch-health.

- date: Date and relative-time formatting
- health: Health score explanations
- batch: Merged-branch lists, delete errors and rebase previews
"""

from .date import format_date, format_relative_date
from .health import build_health_details
from .batch import format_merged_branch, simplify_delete_error, format_conflict_preview

__all__ = [
    "format_date",
    "format_relative_date",
    "build_health_details",
    "format_merged_branch",
    "simplify_delete_error",
    "format_conflict_preview",
]
