"""Health explanation formatting."""

from typing import List

from git_branch_health.constants import HEALTH_LEVEL_LABELS
from git_branch_health.models.branch import BranchStatus
from git_branch_health.models.health import BranchHealth


def _commits(count: int) -> str:
    return f"{count} commit{'s' if count != 1 else ''}"


def build_health_details(branch: BranchStatus, health: BranchHealth) -> str:
    """
    Build a multi-line explanation of a branch's health score.

    Args:
        branch: Branch status the health was computed from
        health: Computed health

    Returns:
        Text with a header, the issues, and a status summary. Example:
        "Branch Health: Critical (45/100)\\n\\nIssues:\\n  • 8 commits behind develop ..."
    """
    lines: List[str] = [
        f"Branch Health: {HEALTH_LEVEL_LABELS[health.level.value]} ({health.score}/100)"
    ]

    if health.issues:
        lines.append("")
        lines.append("Issues:")
        lines.extend(f"  • {issue}" for issue in health.issues)

    lines.append("")
    lines.append("Status:")

    label = "develop" if branch.behind_develop is not None else "base"
    if branch.behind_reference > 0:
        lines.append(f"  • {_commits(branch.behind_reference)} behind {label}")
    if branch.ahead_of_reference > 0:
        lines.append(f"  • {_commits(branch.ahead_of_reference)} ahead of {label}")
    if branch.pr is not None:
        lines.append(f"  • PR: {branch.pr.state.value.upper()} (#{branch.pr.number})")
    if branch.is_merged:
        targets = []
        if branch.merged_into_develop:
            targets.append("develop")
        if branch.merged_into_main:
            targets.append("main")
        lines.append(f"  • Merged into {' and '.join(targets)}")

    return "\n".join(lines)
