"""Version information for git-branch-health."""

__version__ = "0.1.0"
