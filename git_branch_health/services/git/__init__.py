"""Git-related services for git-branch-health."""

from .gateway import GitGateway, detect_repo_root
from .base_branch import BaseBranchResolver
from .branch_queries import BranchQueries, parse_left_right_counts
from .commands import BranchCommands

__all__ = [
    "GitGateway",
    "detect_repo_root",
    "BaseBranchResolver",
    "BranchQueries",
    "parse_left_right_counts",
    "BranchCommands",
]
