"""Branch query service for git-branch-health."""

from datetime import datetime
from typing import List, Optional, Tuple

from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger
from git_branch_health.services.git.gateway import GitGateway

logger = get_logger(__name__)


def parse_left_right_counts(output: str) -> Tuple[int, int]:
    """Parse ``rev-list --left-right --count A...B`` output.

    The left column counts commits only on A (the reference), the right column
    commits only on B (the branch), so the result is (ahead, behind) of B.
    Missing or unparsable columns count as 0.
    """
    parts = output.split("\t")
    behind_str = parts[0].strip() if parts else ""
    ahead_str = parts[1].strip() if len(parts) > 1 else ""

    def _to_int(value: str) -> int:
        try:
            return max(int(value), 0)
        except ValueError:
            return 0

    return _to_int(ahead_str), _to_int(behind_str)


class BranchQueries:
    """Read-only queries about branches and refs."""

    def __init__(self, gateway: GitGateway):
        """Initialize the branch queries service.

        Args:
            gateway: GitGateway for the working copy (dependency injection)
        """
        self.gateway = gateway

    def fetch(self) -> None:
        """Fetch from the default remote. Raises CommandFailure on failure."""
        self.gateway.run("fetch", "--quiet")

    def get_local_branches(self) -> List[str]:
        """List local branch short names, duplicates removed."""
        output = self.gateway.run("for-each-ref", "--format=%(refname:short)", "refs/heads")
        if not output:
            return []

        branches = [line.strip() for line in output.split("\n") if line.strip()]
        return list(dict.fromkeys(branches))

    def ref_exists(self, ref: str) -> bool:
        """Check if git can resolve ref to a revision."""
        return self.gateway.succeeds("rev-parse", "--verify", ref)

    def get_current_branch(self) -> Optional[str]:
        """Get the checked-out branch, or None for detached HEAD or on error."""
        try:
            current = self.gateway.run("branch", "--show-current")
        except CommandFailure as e:
            logger.warning(f"Failed to get current branch: {e}")
            return None
        return current or None

    def get_upstream(self, branch_name: str) -> Optional[str]:
        """Get the upstream tracking ref of a branch, or None if it has none."""
        try:
            upstream = self.gateway.run("rev-parse", "--abbrev-ref", f"{branch_name}@{{upstream}}")
        except CommandFailure as e:
            logger.debug(f"No upstream for {branch_name}: {e.diagnostic}")
            return None
        return upstream or None

    def count_ahead_behind(self, reference: str, branch_name: str) -> Tuple[int, int]:
        """Return (ahead, behind) of branch_name relative to reference.

        Raises:
            CommandFailure: If either ref cannot be resolved
        """
        output = self.gateway.run("rev-list", "--left-right", "--count", f"{reference}...{branch_name}")
        return parse_left_right_counts(output)

    def is_merged_into(self, branch_name: str, target: str) -> bool:
        """Check if every commit of branch_name is reachable from target."""
        return self.gateway.succeeds("merge-base", "--is-ancestor", branch_name, target)

    def get_merged_at(self, branch_name: str, target: str) -> Optional[datetime]:
        """Get the commit time of the first target commit on the ancestry path from branch_name.

        Returns None when the time cannot be determined.
        """
        try:
            output = self.gateway.run(
                "log", "--format=%cI", "--reverse", "--ancestry-path", f"{branch_name}..{target}"
            )
        except CommandFailure as e:
            logger.debug(f"Could not determine merge time of {branch_name} into {target}: {e.diagnostic}")
            return None

        if not output:
            return None

        first_line = output.split("\n")[0].strip()
        try:
            return datetime.fromisoformat(first_line)
        except ValueError:
            logger.debug(f"Unparsable commit date for {branch_name} into {target}: {first_line!r}")
            return None
