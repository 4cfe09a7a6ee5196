"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class PRState(Enum):
    """State of a review request attached to a branch."""
    OPEN = "open"
    CLOSED = "closed"
    MERGED = "merged"


@dataclass(frozen=True)
class PullRequestInfo:
    """Review request found for a branch on an external platform."""
    number: int
    title: str
    state: PRState
    url: str
    platform: str  # github, gitlab, bitbucket


@dataclass
class BranchStatus:
    """Ahead/behind and merge facts for one local branch."""
    name: str
    ahead: int
    behind: int
    is_active: bool = False
    # None = no origin/develop (or origin/main) ref to compare against
    ahead_develop: Optional[int] = None
    behind_develop: Optional[int] = None
    ahead_main: Optional[int] = None
    behind_main: Optional[int] = None
    merged_into_develop: Optional[bool] = None
    merged_into_main: Optional[bool] = None
    merged_at_develop: Optional[datetime] = None
    merged_at_main: Optional[datetime] = None
    pr: Optional[PullRequestInfo] = None

    def __post_init__(self):
        """Validate counts and merge timestamps."""
        for field_name in ("ahead", "behind", "ahead_develop", "behind_develop", "ahead_main", "behind_main"):
            value = getattr(self, field_name)
            if value is not None and value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")

        if self.merged_at_develop is not None and not self.merged_into_develop:
            raise ValueError("merged_at_develop requires merged_into_develop")
        if self.merged_at_main is not None and not self.merged_into_main:
            raise ValueError("merged_at_main requires merged_into_main")

    @property
    def needs_rebase(self) -> bool:
        """True when the branch has diverged from the base."""
        return self.ahead > 0 and self.behind > 0

    @property
    def is_merged(self) -> bool:
        return bool(self.merged_into_develop or self.merged_into_main)

    @property
    def ahead_of_reference(self) -> int:
        """Commits ahead of develop, falling back to the base branch."""
        return self.ahead_develop if self.ahead_develop is not None else self.ahead

    @property
    def behind_reference(self) -> int:
        """Commits behind develop, falling back to the base branch."""
        return self.behind_develop if self.behind_develop is not None else self.behind
