"""Batch delete and rebase preview formatting."""

import re

from git_branch_health.formatters.date import format_relative_date
from git_branch_health.models.batch import MergedBranchCandidate
from git_branch_health.models.conflict import ConflictPreview


def format_merged_branch(candidate: MergedBranchCandidate) -> str:
    """
    Format a merged branch for a deletion list.

    Example:
        "feature/login (merged into develop and main) [2 weeks ago]"
    """
    parts = [candidate.name]

    targets = []
    if candidate.merged_into_develop:
        targets.append("develop")
    if candidate.merged_into_main:
        targets.append("main")
    if targets:
        parts.append(f"(merged into {' and '.join(targets)})")

    merged_at = candidate.merged_at_develop or candidate.merged_at_main
    if merged_at is not None:
        parts.append(f"[{format_relative_date(merged_at)}]")

    return " ".join(parts)


def simplify_delete_error(error: str) -> str:
    """
    Reduce a failed "git branch -d" message to its useful part.

    "error: the branch 'x' is not fully merged" becomes
    "Not fully merged to <upstream>" when git names the upstream.
    """
    if "is not fully merged" in error:
        match = re.search(r"not yet merged to '([^']+)'", error)
        upstream = match.group(1).replace("refs/remotes/", "") if match else "its upstream"
        return f"Not fully merged to {upstream}"

    if "Git command failed:" in error:
        lines = error.split("\n")
        error_line = next((line for line in lines if "error:" in line), None) or next(
            (line for line in lines if "warning:" in line), None
        )
        if error_line:
            return re.sub(r"^\s*(error|warning):\s*", "", error_line, flags=re.IGNORECASE).strip()

    return error


def format_conflict_preview(preview: ConflictPreview, needs_force_push: bool, limit: int = 5) -> str:
    """
    Format a rebase preview: summary, up to limit conflicted files, force-push note.
    """
    lines = [preview.summary]

    if preview.has_conflicts and preview.conflicted_files:
        lines.append("")
        lines.append("Conflicted files:")
        lines.extend(f"  • {path}" for path in preview.conflicted_files[:limit])
        if len(preview.conflicted_files) > limit:
            lines.append(f"  ... and {len(preview.conflicted_files) - limit} more")

    if needs_force_push:
        lines.append("")
        lines.append("⚠️ This will require a force push to update the remote branch.")

    return "\n".join(lines)
