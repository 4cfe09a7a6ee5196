"""Base branch resolution for git-branch-health."""

from typing import Optional

from git_branch_health.constants import (
    FALLBACK_BASE_BRANCH,
    LOCAL_BASE_CANDIDATES,
    REMOTE_BASE_CANDIDATES,
    REMOTE_NAME,
)
from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger
from git_branch_health.services.git.gateway import GitGateway

logger = get_logger(__name__)


class BaseBranchResolver:
    """Determines the integration branch that ahead/behind counts are taken against."""

    def __init__(self, gateway: GitGateway):
        self.gateway = gateway

    def _resolve_symbolic_base(self) -> Optional[str]:
        """Read the remote's default branch from refs/remotes/origin/HEAD."""
        try:
            output = self.gateway.run("symbolic-ref", f"refs/remotes/{REMOTE_NAME}/HEAD")
        except CommandFailure as e:
            logger.debug(f"No symbolic default branch on {REMOTE_NAME}: {e.diagnostic}")
            return None

        stripped = output.removeprefix("refs/remotes/")
        if stripped.startswith(f"{REMOTE_NAME}/"):
            return stripped
        return None

    def _ref_exists(self, ref: str) -> bool:
        return self.gateway.succeeds("rev-parse", "--verify", ref)

    def resolve(self) -> str:
        """Return the base branch name. Never raises.

        Order: the remote's symbolic HEAD, then origin/main, origin/develop,
        origin/master, then the same names locally, and finally "main" even
        if it does not exist.
        """
        symbolic = self._resolve_symbolic_base()
        if symbolic:
            logger.debug(f"Base branch from {REMOTE_NAME}/HEAD: {symbolic}")
            return symbolic

        for candidate in REMOTE_BASE_CANDIDATES:
            if self._ref_exists(candidate):
                logger.debug(f"Base branch from remote candidates: {candidate}")
                return candidate

        for candidate in LOCAL_BASE_CANDIDATES:
            if self._ref_exists(candidate):
                logger.debug(f"Base branch from local candidates: {candidate}")
                return candidate

        logger.warning(f'No base branch found, defaulting to "{FALLBACK_BASE_BRANCH}"')
        return FALLBACK_BASE_BRANCH
