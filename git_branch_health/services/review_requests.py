"""Review-request lookup across code-review platforms."""

import os
from typing import Iterable, List, Optional, Protocol, Union, TYPE_CHECKING

from git_branch_health.constants import REMOTE_NAME
from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger
from git_branch_health.models.branch import PullRequestInfo
from git_branch_health.services.git.gateway import GitGateway
from git_branch_health.services.github_service import GitHubService

if TYPE_CHECKING:
    from git_branch_health.config import Config

logger = get_logger(__name__)


class ReviewRequestResolver(Protocol):
    """Finds the review request (pull/merge request) of a branch on one platform."""

    platform: str

    def resolve_review_request(self, branch_name: str) -> Optional[PullRequestInfo]:
        ...


class ReviewRequestLookup:
    """Queries resolvers in priority order and keeps the first answer."""

    def __init__(self, resolvers: Optional[Iterable[ReviewRequestResolver]] = None):
        self.resolvers: List[ReviewRequestResolver] = list(resolvers or [])

    def __bool__(self) -> bool:
        return bool(self.resolvers)

    def resolve(self, branch_name: str) -> Optional[PullRequestInfo]:
        """Return the first review request found for branch_name, or None."""
        for resolver in self.resolvers:
            try:
                pr = resolver.resolve_review_request(branch_name)
            except Exception as e:
                logger.debug(f"[{resolver.platform}] Lookup failed for {branch_name}: {e}")
                continue
            if pr is not None:
                return pr
        return None

    def close(self) -> None:
        for resolver in self.resolvers:
            close = getattr(resolver, "close", None)
            if close is not None:
                close()


def build_review_lookup(repo_path: str, config: Union["Config", dict]) -> ReviewRequestLookup:
    """Create the lookup for a working copy.

    GitHub is enabled when origin points at github.com and a token is set in
    the config or the GITHUB_TOKEN environment variable.
    """
    try:
        remote_url = GitGateway(repo_path).run("config", "--get", f"remote.{REMOTE_NAME}.url")
    except CommandFailure:
        logger.info(f"No {REMOTE_NAME} remote found. PR detection disabled.")
        return ReviewRequestLookup()

    if "github.com" not in remote_url:
        logger.info(f"Non-GitHub repository detected ({remote_url}). PR detection disabled.")
        return ReviewRequestLookup()

    token = config.get("github_token") or os.environ.get("GITHUB_TOKEN")
    if not token:
        logger.info("GitHub token not found. PR detection disabled.")
        return ReviewRequestLookup()

    github_service = GitHubService(token)
    try:
        github_service.setup_github_api(remote_url)
    except Exception as e:
        logger.warning(f"[GitHub] Setup failed - PR detection disabled: {e}")
        return ReviewRequestLookup()

    logger.info("[GitHub] Integration enabled - PR detection active")
    return ReviewRequestLookup([github_service])
