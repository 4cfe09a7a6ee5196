"""Branch commands that change repository state."""

from git_branch_health.constants import REMOTE_NAME
from git_branch_health.logging_config import get_logger
from git_branch_health.services.git.gateway import GitGateway

logger = get_logger(__name__)


class BranchCommands:
    """Thin wrappers over mutating git commands.

    Each method raises CommandFailure unchanged; callers decide how to report it.
    These must not run while an analysis is reading the same working copy.
    """

    def __init__(self, gateway: GitGateway):
        self.gateway = gateway

    def checkout_branch(self, branch_name: str) -> None:
        logger.info(f"Checking out {branch_name}")
        self.gateway.run("checkout", branch_name)

    def delete_branch(self, branch_name: str, force: bool = False) -> None:
        """Delete a local branch with -d, or -D when force is set."""
        flag = "-D" if force else "-d"
        logger.info(f"Deleting branch {branch_name} ({flag})")
        self.gateway.run("branch", flag, branch_name)

    def rebase_branch(self, branch_name: str, base_branch: str) -> None:
        """Check out branch_name and rebase it onto base_branch."""
        self.checkout_branch(branch_name)
        logger.info(f"Rebasing {branch_name} onto {base_branch}")
        self.gateway.run("rebase", base_branch)

    def push_branch(self, branch_name: str, set_upstream: bool = False) -> None:
        logger.info(f"Pushing {branch_name}")
        if set_upstream:
            self.gateway.run("push", "--set-upstream", REMOTE_NAME, branch_name)
        else:
            self.gateway.run("push", REMOTE_NAME, branch_name)

    def pull_branch(self, branch_name: str) -> None:
        """Check out branch_name and pull its upstream."""
        self.checkout_branch(branch_name)
        logger.info(f"Pulling {branch_name}")
        self.gateway.run("pull")

    def create_branch(self, new_branch_name: str, base_branch: str) -> None:
        """Create new_branch_name from base_branch and check it out."""
        logger.info(f"Creating {new_branch_name} from {base_branch}")
        self.gateway.run("checkout", "-b", new_branch_name, base_branch)

    def merge_branch(self, branch_name: str) -> None:
        """Merge branch_name into the checked-out branch."""
        logger.info(f"Merging {branch_name}")
        self.gateway.run("merge", branch_name)
