"""Branch health scoring.

Score breakdown (100 points total):
- 40 points: drift, how far the branch is behind develop (or the base)
- 25 points: recency, estimated from the ahead/behind shape
- 20 points: review request state
- 15 points: no rebase needed

Protected branches always score 100. Merged branches that are not checked out
are capped at 70 so they surface as cleanup candidates.

Everything here is pure: no git calls, no I/O.
"""

from functools import cmp_to_key
from typing import Iterable, List

from git_branch_health.constants import (
    ATTENTION_THRESHOLD,
    HEALTHY_THRESHOLD,
    MERGED_SCORE_CAP,
    PROTECTED_BRANCHES,
)
from git_branch_health.models.branch import BranchStatus, PRState
from git_branch_health.models.health import BranchHealth, HealthLevel, ScoredBranch


def is_protected_branch(branch_name: str) -> bool:
    return branch_name in PROTECTED_BRANCHES


def classify_score(score: int) -> HealthLevel:
    """Map a 0-100 score to its health level."""
    if score >= HEALTHY_THRESHOLD:
        return HealthLevel.HEALTHY
    if score >= ATTENTION_THRESHOLD:
        return HealthLevel.ATTENTION
    return HealthLevel.CRITICAL


def _reference_label(branch: BranchStatus) -> str:
    return "develop" if branch.behind_develop is not None else "base"


def _score_drift(branch: BranchStatus, issues: List[str]) -> int:
    behind = branch.behind_reference
    label = _reference_label(branch)

    if behind == 0:
        return 40
    if behind <= 5:
        issues.append(f"{behind} commit{'s' if behind != 1 else ''} behind {label}")
        return 30
    if behind <= 20:
        issues.append(f"{behind} commits behind {label}")
        return 15
    issues.append(f"{behind} commits behind {label} (stale)")
    return 0


def _score_recency(branch: BranchStatus, issues: List[str]) -> int:
    ahead = branch.ahead_of_reference
    behind = branch.behind_reference

    if branch.is_merged:
        return 25
    if ahead == 0 and behind == 0:
        return 25
    if 1 <= ahead <= 10:
        return 25
    if ahead > 10:
        if behind > 10:
            issues.append(f"Large divergence from {_reference_label(branch)}")
        return 20
    # Nothing ahead, only behind
    if behind > 20:
        issues.append("No recent activity")
        return 5
    return 15


def _score_review_request(branch: BranchStatus, issues: List[str]) -> int:
    if branch.pr is not None:
        if branch.pr.state == PRState.OPEN:
            return 20
        if branch.pr.state == PRState.MERGED:
            return 15
        issues.append("PR closed without merge")
        return 5

    if branch.is_merged:
        return 15
    if branch.ahead_of_reference >= 5:
        issues.append("No PR created yet")
    return 10


def _score_rebase(branch: BranchStatus, issues: List[str]) -> int:
    if branch.needs_rebase:
        issues.append("Needs rebase (diverged)")
        return 0
    if branch.behind_reference > 0:
        return 5
    return 15


def calculate_branch_health(branch: BranchStatus) -> BranchHealth:
    """Calculate the health score, level and issues of a branch."""
    issues: List[str] = []
    score = (
        _score_drift(branch, issues)
        + _score_recency(branch, issues)
        + _score_review_request(branch, issues)
        + _score_rebase(branch, issues)
    )

    if is_protected_branch(branch.name):
        score = 100
        issues = []
    elif branch.is_merged and not branch.is_active:
        score = min(score, MERGED_SCORE_CAP)
        issues.append("Ready to delete (merged)")

    return BranchHealth(score=score, level=classify_score(score), issues=tuple(issues))


def compare_by_health(a: ScoredBranch, b: ScoredBranch) -> int:
    """Order branches for display. Negative if a sorts first.

    1. Active branch first
    2. Protected branches next
    3. Critical, then attention, then healthy
    4. Lower score first within a level
    5. More commits behind first
    Without health on either side, only the behind count is compared.
    """
    if a.status.is_active != b.status.is_active:
        return -1 if a.status.is_active else 1

    a_protected = is_protected_branch(a.status.name)
    b_protected = is_protected_branch(b.status.name)
    if a_protected != b_protected:
        return -1 if a_protected else 1

    behind_diff = b.status.behind_reference - a.status.behind_reference
    if a.health is None or b.health is None:
        return behind_diff

    level_diff = a.health.level.severity - b.health.level.severity
    if level_diff != 0:
        return level_diff

    score_diff = a.health.score - b.health.score
    if score_diff != 0:
        return score_diff

    return behind_diff


def score_branches(statuses: Iterable[BranchStatus]) -> List[ScoredBranch]:
    """Pair every status with its health."""
    return [ScoredBranch(status, calculate_branch_health(status)) for status in statuses]


def sort_by_health(branches: Iterable[ScoredBranch]) -> List[ScoredBranch]:
    return sorted(branches, key=cmp_to_key(compare_by_health))
