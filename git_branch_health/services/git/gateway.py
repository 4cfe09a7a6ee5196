"""Synchronous git command gateway.

Every git invocation in git-branch-health goes through GitGateway.run(), which
returns the command's trimmed stdout or raises CommandFailure carrying the
arguments, the working directory and git's diagnostic output.
"""

import os
from typing import Optional

import git

from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger

logger = get_logger(__name__)


class GitGateway:
    """Runs git subcommands against one working copy."""

    def __init__(self, repo_path: str):
        """Initialize the gateway.

        Args:
            repo_path: Path to the working copy (string path, not repo object)
        """
        self.repo_path = repo_path

    def _get_git(self) -> git.Git:
        """Get a git command wrapper bound to the working copy.

        A fresh wrapper per call keeps the gateway safe to share between threads.
        """
        return git.Git(self.repo_path)

    def run(self, *args: str) -> str:
        """Run ``git <args>`` and return its stripped stdout.

        Raises:
            CommandFailure: If git exits non-zero or cannot be started
        """
        command = ["git", *args]
        logger.debug(f"Running: {' '.join(command)} (in {self.repo_path})")

        try:
            status, stdout, stderr = self._get_git().execute(
                command, with_extended_output=True, with_exceptions=False
            )
        except git.exc.GitCommandNotFound as e:
            raise CommandFailure(args, self.repo_path, str(e)) from e

        if status != 0:
            diagnostic = (stderr or "").strip() or (stdout or "").strip() or None
            logger.debug(f"git {' '.join(args)} exited {status}: {diagnostic}")
            raise CommandFailure(args, self.repo_path, diagnostic, status)

        return (stdout or "").strip()

    def succeeds(self, *args: str) -> bool:
        """Run a git command for its exit status only."""
        try:
            self.run(*args)
            return True
        except CommandFailure:
            return False


def detect_repo_root(path: str) -> Optional[str]:
    """Return the top-level directory of the working copy containing path.

    Returns None when path is not inside a Git repository.
    """
    try:
        output = GitGateway(path).run("rev-parse", "--show-toplevel")
    except CommandFailure as e:
        logger.debug(f"No repository at {path}: {e.diagnostic}")
        return None

    if not output:
        return None
    return os.path.abspath(output)
