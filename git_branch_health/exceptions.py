"""Custom exceptions for git-branch-health"""

from typing import Optional, Sequence


class GitBranchHealthError(Exception):
    """Base exception for all git-branch-health errors."""
    pass


class CommandFailure(GitBranchHealthError):
    """Exception raised when a git subcommand exits with a non-zero status."""

    def __init__(
        self,
        args: Sequence[str],
        cwd: str,
        diagnostic: Optional[str] = None,
        status: Optional[int] = None,
    ):
        self.git_args = list(args)
        self.cwd = cwd
        self.diagnostic = diagnostic or "Unknown error"
        self.status = status

        error_msg = f"Git command failed: git {self.command}\n  in {cwd}\n  {self.diagnostic}"
        super().__init__(error_msg)

    @property
    def command(self) -> str:
        """The git arguments as a single string."""
        return " ".join(self.git_args)


class RepositoryNotFoundError(GitBranchHealthError):
    """Exception raised when a path is not inside a Git working copy."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No Git repository found at {path}")


class ReviewServiceError(GitBranchHealthError):
    """Exception raised when a code-review platform cannot be set up."""

    def __init__(self, platform: str, operation: str, message: Optional[str] = None):
        self.platform = platform
        self.operation = operation
        self.message = message

        error_msg = f"{platform} operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
