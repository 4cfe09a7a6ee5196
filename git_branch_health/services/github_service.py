"""GitHub review-request resolver"""

import re
from typing import Optional, TYPE_CHECKING
from urllib.parse import urlparse

from github import Auth, Github

from git_branch_health.exceptions import ReviewServiceError
from git_branch_health.logging_config import get_logger
from git_branch_health.models.branch import PRState, PullRequestInfo

if TYPE_CHECKING:
    from github.Repository import Repository

logger = get_logger(__name__)


def parse_github_repo(remote_url: str) -> str:
    """Extract "owner/repo" from an SSH or HTTPS GitHub remote URL.

    Raises:
        ValueError: If the URL does not point at a GitHub repository
    """
    if remote_url.startswith("git@"):
        # git@github.com:org/repo.git
        if "github.com:" not in remote_url:
            raise ValueError(f"Not a GitHub remote: {remote_url}")
        path = remote_url.split("github.com:", 1)[1]
    else:
        # https://github.com/org/repo.git or ssh://git@github.com/org/repo.git
        parsed_url = urlparse(remote_url)
        if not parsed_url.hostname or "github.com" not in parsed_url.hostname:
            raise ValueError(f"Not a GitHub remote: {remote_url}")
        path = parsed_url.path

    path = path.strip("/")
    if path.endswith(".git"):
        path = path[:-4]

    if not re.fullmatch(r"[^/]+/[^/]+", path):
        raise ValueError(f"Cannot parse owner/repo from {remote_url}")
    return path


class GitHubService:
    """Resolves branches to GitHub pull requests."""

    platform = "github"

    def __init__(self, github_token: Optional[str]):
        self.github_token = github_token
        self.github_repo: Optional[str] = None
        self.github: Optional[Github] = None
        self.gh_repo: Optional["Repository"] = None

    def setup_github_api(self, remote_url: str) -> None:
        """Connect to the repository behind remote_url.

        Raises:
            ReviewServiceError: If the URL cannot be parsed or the API is unreachable
        """
        if not self.github_token:
            raise ReviewServiceError("GitHub", "setup", "No GitHub token configured")

        try:
            self.github_repo = parse_github_repo(remote_url)
            self.github = Github(auth=Auth.Token(self.github_token))
            self.gh_repo = self.github.get_repo(self.github_repo)
        except Exception as e:
            raise ReviewServiceError("GitHub", "setup", str(e)) from e

        logger.debug(f"[GitHub] GitHub integration enabled for: {self.github_repo}")

    def resolve_review_request(self, branch_name: str) -> Optional[PullRequestInfo]:
        """Find the most recent pull request opened from branch_name."""
        if self.gh_repo is None or self.github_repo is None:
            return None

        owner = self.github_repo.split("/")[0]
        pulls = self.gh_repo.get_pulls(state="all", head=f"{owner}:{branch_name}")
        pr = next(iter(pulls), None)
        if pr is None:
            return None

        if pr.merged_at is not None:
            state = PRState.MERGED
        else:
            state = PRState(pr.state)

        logger.debug(f"[GitHub] Branch {branch_name} has PR #{pr.number} ({state.value})")
        return PullRequestInfo(
            number=pr.number,
            title=pr.title,
            state=state,
            url=pr.html_url,
            platform=self.platform,
        )

    def close(self) -> None:
        """Close the GitHub API connection to clean up resources."""
        if self.github:
            try:
                self.github.close()
                logger.debug("[GitHub] Closed GitHub API connection")
            except Exception as e:
                logger.debug(f"[GitHub] Error closing GitHub API connection: {e}")
