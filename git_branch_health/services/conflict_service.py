"""Rebase conflict forecasting"""

import re
from typing import List

from git_branch_health.constants import CONFLICT_MARKERS
from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger
from git_branch_health.models.conflict import ConflictPreview
from git_branch_health.services.git import BranchQueries, GitGateway

logger = get_logger(__name__)

# <<<<<<< <label>:<path>
CONFLICT_START_PATTERN = re.compile(r"<<<<<<< .*?:(.*)")
# @@ -1,5 +1,5 @@ <path>
HUNK_HEADER_PATTERN = re.compile(r"@@ .* @@ (.*)")
#   our    100644 <hash> <path>
STAGE_LINE_PATTERN = re.compile(r"^\s+(?:base|our|their)\s+\d+\s+[a-f0-9]+\s+(.+)$")

CLEAN_SUMMARY = "✅ Clean rebase (0 conflicts expected)"
UNAVAILABLE_SUMMARY = "⚠️ Unable to preview conflicts (rebase may still work)"


def has_conflict_markers(output: str) -> bool:
    return any(marker in output for marker in CONFLICT_MARKERS)


def extract_conflicted_files(output: str) -> List[str]:
    """Recover conflicted file paths from merge-tree output.

    Paths come from conflict-start markers, hunk headers and
    base/our/their stage lines. Returns them sorted and deduplicated.
    """
    files = set()

    for line in output.split("\n"):
        if "<<<<<<<" in line:
            match = CONFLICT_START_PATTERN.search(line)
            if match and match.group(1).strip():
                files.add(match.group(1).strip())
        elif ">>>>>>>" in line:
            continue
        elif line.startswith("@@"):
            match = HUNK_HEADER_PATTERN.match(line)
            if match and match.group(1).strip():
                files.add(match.group(1).strip())
        else:
            match = STAGE_LINE_PATTERN.match(line)
            if match:
                files.add(match.group(1).strip())

    return sorted(files)


def parse_merge_tree_output(output: str) -> ConflictPreview:
    """Build a ConflictPreview from the text of a simulated merge."""
    if not has_conflict_markers(output):
        return ConflictPreview(
            has_conflicts=False,
            conflict_count=0,
            conflicted_files=[],
            summary=CLEAN_SUMMARY,
        )

    conflicted_files = extract_conflicted_files(output)
    if conflicted_files:
        conflict_count = len(conflicted_files)
    else:
        # Conflicts without recoverable paths: report the section count instead
        conflict_count = max(output.count("<<<<<<<"), 1)
        conflicted_files = [
            f"{conflict_count} conflict section{'s' if conflict_count != 1 else ''} detected"
        ]

    return ConflictPreview(
        has_conflicts=True,
        conflict_count=conflict_count,
        conflicted_files=conflicted_files,
        summary=f"⚠️ {conflict_count} file{'s' if conflict_count != 1 else ''} will have conflicts",
    )


class ConflictService:
    """Predicts rebase conflicts and force-push needs without touching the working copy."""

    def __init__(self, gateway: GitGateway):
        self.gateway = gateway
        self.queries = BranchQueries(gateway)

    def preview_rebase_conflicts(self, branch_name: str, target_base: str) -> ConflictPreview:
        """Simulate merging branch_name and target_base from their common ancestor.

        Never raises: a failed simulation returns a conflict-free preview
        whose summary and error say the preview was unavailable.
        """
        try:
            merge_base = self.gateway.run("merge-base", branch_name, target_base)
            output = self.gateway.run("merge-tree", merge_base, target_base, branch_name)
        except CommandFailure as e:
            logger.warning(f"Conflict preview failed for {branch_name} onto {target_base}: {e}")
            return ConflictPreview(
                has_conflicts=False,
                conflict_count=0,
                conflicted_files=[],
                summary=UNAVAILABLE_SUMMARY,
                error=str(e),
            )

        preview = parse_merge_tree_output(output)
        logger.debug(f"Conflict preview for {branch_name} onto {target_base}: {preview.summary}")
        return preview

    def would_require_force_push(self, branch_name: str) -> bool:
        """Check if rebasing branch_name would rewrite commits already tracked upstream.

        False when the branch has no upstream or the check is inconclusive.
        """
        upstream = self.queries.get_upstream(branch_name)
        if not upstream:
            return False

        try:
            commits_ahead = self.gateway.run("rev-list", "--count", f"{upstream}..{branch_name}")
            return int(commits_ahead) > 0
        except (CommandFailure, ValueError) as e:
            logger.debug(f"Could not determine force-push need for {branch_name}: {e}")
            return False
